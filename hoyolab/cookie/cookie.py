# cookie de Hoyolab <-> Credential

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote

from hoyolab.errors import MalformedCredentialError
from hoyolab.language import parse_lang

# claves que nos interesan de la cookie del navegador
COOKIE_KEYS = ("ltoken", "ltuid", "account_id", "cookie_token", "mi18nLang")
_INT_KEYS = ("ltuid", "account_id")


def to_camel_case(text: str) -> str:
    """'cookie_token' -> 'cookieToken' (primer tramo intacto)."""
    words = text.split("_")
    return words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])


def to_snake_case(text: str) -> str:
    """'mi18nLang' -> 'mi18n_lang' (guion bajo antes de cada mayúscula)."""
    return re.sub(r"([A-Z])", r"_\1", text).lower()


@dataclass(frozen=True)
class Credential:
    """
    Datos de autenticación sacados de la cookie:
    - ltoken / ltuid: obligatorios
    - account_id: si falta se copia de ltuid (y viceversa)
    - cookie_token, mi18n_lang: opcionales
    """
    ltoken: Optional[str] = None
    ltuid: Optional[int] = None
    cookie_token: Optional[str] = None
    account_id: Optional[int] = None
    mi18n_lang: Optional[str] = None

    def __post_init__(self):
        if self.ltuid and not self.account_id:
            object.__setattr__(self, "account_id", self.ltuid)
        elif not self.ltuid and self.account_id:
            object.__setattr__(self, "ltuid", self.account_id)
        if not self.ltoken or not self.ltuid:
            raise MalformedCredentialError("Cookie key ltuid or ltoken doesnt exist !")


def parse_cookie_string(cookie_string: str) -> Credential:
    """
    'ltoken=xxx; ltuid=123; mi18nLang=es-es' -> Credential.
    Ignora claves que no conocemos. Lanza MalformedCredentialError si falta
    ltoken o ltuid (account_id cuenta como ltuid).
    """
    fields: dict = {}
    for chunk in (cookie_string or "").split(";"):
        key, sep, value = chunk.strip().partition("=")
        if not sep or key not in COOKIE_KEYS:
            continue
        value = unquote(value)
        if key in _INT_KEYS:
            try:
                value = int(value, 10)
            except ValueError:
                raise MalformedCredentialError(f"Cookie key {key} is not numeric: {value!r}")
        elif key == "mi18nLang":
            value = parse_lang(value).value
        fields[to_snake_case(key)] = value
    return Credential(**fields)


def serialize_cookie(credential: Credential) -> str:
    """
    Credential -> 'ltoken=...; ltuid=...; cookie_token=...; account_id=...; mi18nLang=...'
    Omite los campos vacíos.
    """
    if not credential.ltoken or not credential.ltuid:
        raise MalformedCredentialError("Cookie key ltuid or ltoken doesnt exist !")
    values = {
        "ltoken": credential.ltoken,
        "ltuid": credential.ltuid,
        "cookie_token": credential.cookie_token,
        "account_id": credential.account_id or credential.ltuid,
        "mi18n_lang": credential.mi18n_lang,
    }
    parts = []
    for attr, value in values.items():
        if not value:
            continue
        # mi18n_lang vuelve a su clave camelCase de cookie
        key = attr if attr in COOKIE_KEYS else to_camel_case(attr)
        parts.append(f"{key}={value}")
    return "; ".join(parts)
