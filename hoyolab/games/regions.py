# uid -> región de servidor, una tabla por juego

from __future__ import annotations

from hoyolab.errors import InvalidIdentifierError
from hoyolab.games.enums import GenshinRegion, HsrRegion, HonkaiRegion

# primer dígito del uid -> región
GENSHIN_REGIONS: dict[int, GenshinRegion] = {
    6: GenshinRegion.USA,
    7: GenshinRegion.EUROPE,
    8: GenshinRegion.ASIA,
    9: GenshinRegion.CHINA_TAIWAN,
}

HSR_REGIONS: dict[int, HsrRegion] = {
    6: HsrRegion.USA,
    7: HsrRegion.EUROPE,
    8: HsrRegion.ASIA,
    9: HsrRegion.CHINA_TAIWAN,
}

# (mínimo, máximo) exclusivos -> región
HONKAI_REGIONS: tuple[tuple[int, int, HonkaiRegion], ...] = (
    (10_000_000, 100_000_000, HonkaiRegion.ASIA),
    (100_000_000, 200_000_000, HonkaiRegion.USA),
    (200_000_000, 300_000_000, HonkaiRegion.EUROPE),
)


def _leading_digit(uid: int | str) -> int:
    s = str(uid).strip()
    if not s or not s[0].isdigit():
        raise InvalidIdentifierError(f"Given UID {uid} is invalid !")
    return int(s[0])


def get_genshin_region(uid: int | str) -> str:
    region = GENSHIN_REGIONS.get(_leading_digit(uid))
    if region is None:
        raise InvalidIdentifierError(f"Given UID {uid} is invalid !")
    return region.value


def get_hsr_region(uid: int | str) -> str:
    region = HSR_REGIONS.get(_leading_digit(uid))
    if region is None:
        raise InvalidIdentifierError(f"Given UID {uid} is invalid !")
    return region.value


def get_hi3_region(uid: int | str) -> str:
    try:
        n = int(str(uid).strip())
    except ValueError:
        raise InvalidIdentifierError(f"Given UID {uid} is invalid !")
    for low, high, region in HONKAI_REGIONS:
        if low < n < high:
            return region.value
    raise InvalidIdentifierError(f"Given UID {uid} is invalid !")
