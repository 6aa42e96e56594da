from __future__ import annotations
import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

def _getenv_bool(name: str, default: bool) -> bool:
    v = os.getenv(name, str(default)).strip().lower()
    return v in ("1", "true", "yes", "y", "on")

def _getenv_csv(name: str, default: str = "") -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(x.strip() for x in raw.split(",") if x.strip())

def _parse_timeout(s: str) -> float | None:
    """
    Convierte REQUEST_TIMEOUT_SEC a float.
    0 o vacío -> None (sin timeout, lo que decida requests).
    """
    s = (s or "").strip()
    if not s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    return v if v > 0 else None

@dataclass(frozen=True)
class Settings:
    # credenciales
    HOYOLAB_COOKIE: str = ""
    HOYOLAB_LANG: str = ""
    HOYOLAB_GAMES: tuple[str, ...] = ("hk4e_global",)
    REDEEM_CODE: str = ""

    # caché
    CACHE_TTL_SEC: int = 30

    # reintentos (-2016)
    RETRY_MAX: int = 60
    RETRY_DELAY_SEC: float = 1.0
    RETRY_RAISE_ON_EXHAUSTED: bool = False

    # transporte
    REQUEST_TIMEOUT_SEC: float | None = 30.0
    LEGACY_SWALLOW_ERRORS: bool = False

    # logs
    LOG_LEVEL: str = "INFO"

def load_settings() -> Settings:
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()

    HOYOLAB_COOKIE = os.getenv("HOYOLAB_COOKIE", "").strip()
    HOYOLAB_LANG = os.getenv("HOYOLAB_LANG", "").strip()
    HOYOLAB_GAMES = _getenv_csv("HOYOLAB_GAMES", "hk4e_global")
    REDEEM_CODE = os.getenv("REDEEM_CODE", "").strip()

    CACHE_TTL_SEC = int(os.getenv("CACHE_TTL_SEC", "30"))

    RETRY_MAX = int(os.getenv("RETRY_MAX", "60"))
    RETRY_DELAY_SEC = float(os.getenv("RETRY_DELAY_SEC", "1"))
    RETRY_RAISE_ON_EXHAUSTED = _getenv_bool("RETRY_RAISE_ON_EXHAUSTED", False)

    REQUEST_TIMEOUT_SEC = _parse_timeout(os.getenv("REQUEST_TIMEOUT_SEC", "30"))
    LEGACY_SWALLOW_ERRORS = _getenv_bool("LEGACY_SWALLOW_ERRORS", False)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        HOYOLAB_COOKIE=HOYOLAB_COOKIE,
        HOYOLAB_LANG=HOYOLAB_LANG,
        HOYOLAB_GAMES=HOYOLAB_GAMES,
        REDEEM_CODE=REDEEM_CODE,
        CACHE_TTL_SEC=CACHE_TTL_SEC,
        RETRY_MAX=RETRY_MAX,
        RETRY_DELAY_SEC=RETRY_DELAY_SEC,
        RETRY_RAISE_ON_EXHAUSTED=RETRY_RAISE_ON_EXHAUSTED,
        REQUEST_TIMEOUT_SEC=REQUEST_TIMEOUT_SEC,
        LEGACY_SWALLOW_ERRORS=LEGACY_SWALLOW_ERRORS,
        LOG_LEVEL=LOG_LEVEL,
    )
