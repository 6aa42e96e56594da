# firma DS (dynamic security) para endpoints de récords/diario

from __future__ import annotations
import time
import random
import string
import hashlib

DS_SALT = "6s25p5ox5y14umn1p61aqyyvbvvl3lrt"
_DS_CHARS = string.ascii_letters


def md5_hex(s: str) -> str:
    return hashlib.md5(s.encode("utf-8")).hexdigest()


def generate_ds(timestamp: int | None = None, rand: str | None = None) -> str:
    """
    Devuelve '<unix_ts>,<6 letras>,<md5>' con md5('salt=...&t=...&r=...').
    timestamp/rand solo se pasan en tests; por defecto reloj y azar.
    """
    t = int(time.time()) if timestamp is None else int(timestamp)
    r = rand if rand is not None else "".join(random.choices(_DS_CHARS, k=6))
    h = md5_hex(f"salt={DS_SALT}&t={t}&r={r}")
    return f"{t},{r},{h}"


def delay(seconds: float) -> None:
    time.sleep(seconds)
