from __future__ import annotations
from enum import Enum

from hoyolab.errors import HoyolabError


class GamesEnum(str, Enum):
    GENSHIN_IMPACT = "hk4e_global"
    HONKAI_IMPACT = "bh3_global"
    HONKAI_STAR_RAIL = "hkrpg_global"


def parse_game(game: GamesEnum | str) -> GamesEnum:
    try:
        return GamesEnum(game)
    except ValueError:
        raise HoyolabError("Game Paramater is invalid")


class GenshinRegion(str, Enum):
    USA = "os_usa"
    EUROPE = "os_euro"
    ASIA = "os_asia"
    CHINA_TAIWAN = "os_cht"


class HsrRegion(str, Enum):
    USA = "prod_official_usa"  # uids 6xxxxxxxx: América (antes se resolvía a prod_official_asia)
    EUROPE = "prod_official_euro"
    ASIA = "prod_official_asia"
    CHINA_TAIWAN = "prod_official_cht"


class HonkaiRegion(str, Enum):
    USA = "usa01"
    EUROPE = "eur01"
    ASIA = "overseas01"
