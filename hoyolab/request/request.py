# construir peticiones, enviarlas y normalizar errores

from __future__ import annotations
import logging
import threading
from typing import Any, Optional

import requests

from hoyolab.errors import HoyolabError, TransportError, RateLimitedRetryExhausted
from hoyolab.language import LanguageEnum, parse_lang
from hoyolab.request.cache import Cache
from hoyolab.request.signature import generate_ds, delay

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/109.0.0.0 Safari/537.36"
)

# retcode que manda el servidor cuando hay que esperar y repetir
RATE_LIMIT_RETCODE = -2016
SENTINEL_RETCODE = -9999
MAX_RETRIES = 60
RETRY_DELAY_SEC = 1.0


class Request:
    """
    Builder de peticiones a Hoyolab.

    Estado:
    - headers: persisten entre envíos (cookie, idioma, referer, DS)
    - params: query string, persisten entre envíos
    - body: se vacía tras cada envío con respuesta final
    Los setters devuelven self para encadenar:
        req.set_params({"lang": "es-es"}).set_ds().send(url)
    """

    def __init__(self, cookies: Optional[str] = None, cache: Optional[Cache] = None, *,
                 session: Optional[requests.Session] = None,
                 max_retries: int = MAX_RETRIES,
                 retry_delay: float = RETRY_DELAY_SEC,
                 timeout: Optional[float] = None,
                 legacy_errors: bool = False,
                 raise_on_exhausted: bool = False):
        self.headers: dict[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "x-rpc-app_version": "1.5.0",
            "x-rpc-client_type": "5",
            "x-rpc-language": LanguageEnum.ENGLISH.value,
        }
        if cookies:
            self.headers["Cookie"] = cookies
        self.body: dict[str, Any] = {}
        self.params: dict[str, Any] = {}
        self.ds = False
        self.cache = cache if cache is not None else Cache()
        self.session = session if session is not None else requests.Session()
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self.legacy_errors = legacy_errors
        self.raise_on_exhausted = raise_on_exhausted
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, cookies: Optional[str], settings) -> "Request":
        return cls(
            cookies,
            Cache(std_ttl=settings.CACHE_TTL_SEC),
            max_retries=settings.RETRY_MAX,
            retry_delay=settings.RETRY_DELAY_SEC,
            timeout=settings.REQUEST_TIMEOUT_SEC,
            legacy_errors=settings.LEGACY_SWALLOW_ERRORS,
            raise_on_exhausted=settings.RETRY_RAISE_ON_EXHAUSTED,
        )

    # --- setters (builder) ---

    def set_referer(self, url: str) -> "Request":
        with self._lock:
            self.headers["Referer"] = url
            self.headers["Origin"] = url
        return self

    def set_body(self, body: dict) -> "Request":
        with self._lock:
            self.body = {**self.body, **body}
        return self

    def set_params(self, params: dict) -> "Request":
        with self._lock:
            self.params = {**self.params, **params}
        return self

    def set_ds(self, flag: bool = True) -> "Request":
        with self._lock:
            self.ds = flag
            if not flag:
                self.headers.pop("DS", None)
        return self

    def set_lang(self, lang: LanguageEnum | str = LanguageEnum.ENGLISH) -> "Request":
        with self._lock:
            self.headers["x-rpc-language"] = parse_lang(lang).value
        return self

    # --- envío ---

    def send(self, url: str, method: str = "GET", ttl: Optional[float] = None) -> Any:
        """
        Envía la petición y devuelve el JSON ({retcode, message, data}).

        1) caché: si hay entrada viva se devuelve sin tocar la red
        2) retcode -2016: espera retry_delay y repite, hasta max_retries veces
        3) respuesta final -> caché con ttl, body vacío
        Status no 2xx o fallo de requests -> TransportError (sin reintento).
        """
        method = method.upper()
        with self._lock:
            try:
                return self._send(url, method, ttl)
            except HoyolabError:
                raise
            except requests.RequestException as e:
                status = e.response.status_code if e.response is not None else None
                raise TransportError(str(e), status_code=status, code=type(e).__name__) from e
            except Exception as e:
                if self.legacy_errors:
                    logger.warning("[REQ] Error inesperado en %s %s (modo legacy): %r", method, url, e)
                    return {"retcode": SENTINEL_RETCODE, "message": "", "data": None}
                logger.error("[REQ] Error inesperado en %s %s: %r", method, url, e)
                raise HoyolabError(f"Unexpected error: {e!r}") from e

    def _send(self, url: str, method: str, ttl: Optional[float]) -> Any:
        attempt = 1
        while True:
            cache_key = {"url": url, "method": method, "body": self.body, "params": self.params}
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.debug("[REQ] Respuesta desde caché: %s %s", method, url)
                return cached

            result = self._dispatch(url, method)

            if result.get("retcode") == RATE_LIMIT_RETCODE:
                if attempt <= self.max_retries:
                    attempt += 1
                    logger.info("[REQ] retcode -2016 en %s; reintento %d/%d", url, attempt - 1, self.max_retries)
                    delay(self.retry_delay)
                    continue
                if self.raise_on_exhausted:
                    raise RateLimitedRetryExhausted(attempt, result)
                logger.warning("[REQ] Reintentos agotados (%d) en %s; se devuelve tal cual", self.max_retries, url)

            self.cache.set(cache_key, result, ttl)
            self.body = {}
            return result

    def _dispatch(self, url: str, method: str) -> Any:
        headers = dict(self.headers)
        if self.ds:
            headers["DS"] = generate_ds()

        kwargs: dict[str, Any] = {
            "params": self.params,
            "headers": headers,
            "timeout": self.timeout,
        }
        if method == "POST":
            kwargs["json"] = self.body

        resp = self.session.request(method, url, **kwargs)
        if not 200 <= resp.status_code < 300:
            reason = resp.reason or resp.text
            logger.error("[REQ] %s %s -> HTTP %s", method, url, resp.status_code)
            raise TransportError(reason, status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            # no es un fallo de transporte: el servidor respondió 2xx sin JSON
            raise ValueError(f"Respuesta no JSON desde {url}") from e
