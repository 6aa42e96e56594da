from __future__ import annotations
import json
import time
import hashlib
import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_TTL = 30


class Cache:
    """
    Caché en memoria con TTL por entrada.
    La clave es el md5 del JSON (claves ordenadas) de {url, method, body, params}.
    ttl=0 -> la entrada no caduca.
    """

    def __init__(self, std_ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        self.std_ttl = std_ttl
        self._clock = clock
        # md5 -> (expira_en | None, valor)
        self._store: dict[str, tuple[float | None, Any]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def generate_key(key: Any) -> str:
        raw = json.dumps(key, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
        return hashlib.md5(raw.encode("utf-8")).hexdigest()

    def set(self, key: Any, value: Any, ttl: float | None = None) -> bool:
        if ttl is None:
            ttl = self.std_ttl
        # 0 = sin caducidad; negativo = ya caducada
        expires_at = None if ttl == 0 else self._clock() + ttl
        with self._lock:
            self._store[self.generate_key(key)] = (expires_at, value)
        return True

    def get(self, key: Any) -> Any | None:
        digest = self.generate_key(key)
        with self._lock:
            entry = self._store.get(digest)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._store[digest]
                logger.debug("[CACHE] Entrada caducada %s", digest)
                return None
            return value

    def has(self, key: Any) -> bool:
        return self.get(key) is not None

    def delete(self, key: Any) -> int:
        with self._lock:
            return 1 if self._store.pop(self.generate_key(key), None) is not None else 0
