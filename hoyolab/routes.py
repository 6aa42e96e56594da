# URLs del servicio. Todo lo que depende del juego va en DAILY_ROUTES.

from __future__ import annotations
from dataclasses import dataclass

from hoyolab.games.enums import GamesEnum

BBS = "https://bbs-api-os.hoyolab.com"
API_ACCOUNT = "https://api-account-os.hoyolab.com"
HK4E = "https://sg-hk4e-api.hoyolab.com"
SG_PUBLIC = "https://sg-public-api.hoyolab.com"
REFERER = "https://act.hoyolab.com"

GAMES_ACCOUNT = f"{API_ACCOUNT}/account/binding/api/getUserGameRolesByCookieToken"

REDEEM = f"{HK4E}/common/apicdkey/api/webExchangeCdkey"

RECORD_BASE = f"{BBS}/game_record/genshin/api"
RECORD_INDEX = f"{RECORD_BASE}/index"
RECORD_CHARACTER = f"{RECORD_BASE}/character"
RECORD_AVATAR_BASIC_INFO = f"{RECORD_BASE}/avatarBasicInfo"
RECORD_SPIRAL_ABYSS = f"{RECORD_BASE}/spiralAbyss"
RECORD_DAILY_NOTE = f"{RECORD_BASE}/dailyNote"

DIARY_LIST = f"{HK4E}/event/ysledgeros/month_info"
DIARY_DETAIL = f"{HK4E}/event/ysledgeros/month_detail"


@dataclass(frozen=True)
class DailyRoutes:
    base: str
    event: str
    act_id: str
    biz: str

    def _url(self, action: str) -> str:
        return f"{self.base}/event/{self.event}/{action}?act_id={self.act_id}"

    @property
    def info(self) -> str:
        return self._url("info")

    @property
    def reward(self) -> str:
        return self._url("home")

    @property
    def claim(self) -> str:
        return self._url("sign")


DAILY_ROUTES: dict[GamesEnum, DailyRoutes] = {
    GamesEnum.GENSHIN_IMPACT: DailyRoutes(HK4E, "sol", "e202102251931481", "hk4e"),
    GamesEnum.HONKAI_STAR_RAIL: DailyRoutes(SG_PUBLIC, "luna/os", "e202303301540311", "hkrpg"),
    # el servidor de HI3 también responde como hk4e
    GamesEnum.HONKAI_IMPACT: DailyRoutes(SG_PUBLIC, "mani", "e202110291205111", "hk4e"),
}
