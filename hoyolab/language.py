from __future__ import annotations
from enum import Enum


class LanguageEnum(str, Enum):
    SIMPLIFIED_CHINESE = "zh-cn"
    TRADITIONAL_CHINESE = "zh-tw"
    GERMAN = "de-de"
    ENGLISH = "en-us"
    SPANISH = "es-es"
    FRENCH = "fr-fr"
    INDONESIAN = "id-id"
    ITALIAN = "it-it"
    JAPANESE = "ja-jp"
    KOREAN = "ko-kr"
    PORTUGUESE = "pt-pt"
    RUSSIAN = "ru-ru"
    THAI = "th-th"
    TURKISH = "tr-tr"
    VIETNAMESE = "vi-vn"


def parse_lang(lang: str | None) -> LanguageEnum:
    """
    'es-es' -> LanguageEnum.SPANISH.
    Vacío, None o desconocido -> inglés.
    """
    if isinstance(lang, LanguageEnum):
        return lang
    if not lang:
        return LanguageEnum.ENGLISH
    try:
        return LanguageEnum(str(lang).strip())
    except ValueError:
        return LanguageEnum.ENGLISH
