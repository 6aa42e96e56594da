# clientes por juego: montan Request + módulos con la cuenta resuelta

from __future__ import annotations
import logging
from typing import Callable, Optional, Union

from hoyolab.cookie.cookie import Credential, serialize_cookie
from hoyolab.games.account import Hoyolab, load_credential
from hoyolab.games.enums import GamesEnum
from hoyolab.games.regions import get_genshin_region, get_hsr_region, get_hi3_region
from hoyolab.language import LanguageEnum, parse_lang
from hoyolab.modules.daily import DailyModule
from hoyolab.modules.diary import DiaryModule
from hoyolab.modules.records import RecordModule
from hoyolab.modules.redeem import RedeemModule
from hoyolab.request.request import Request
from hoyolab.routes import REFERER

logger = logging.getLogger(__name__)


class GameClient:
    """
    Base común. Cada juego fija GAME y su resolvedor de región.

    - cookie: string de cookie o Credential ya parseado
    - uid: uid del juego; si viene se deriva la región
    - lang: por defecto el mi18nLang de la cookie (o inglés)
    - settings: Settings opcional (TTL, reintentos, timeout...)
    """

    GAME: GamesEnum
    resolve_region: Callable[[int], str]

    def __init__(self, cookie: Union[str, Credential], uid: Optional[int] = None,
                 lang: Optional[LanguageEnum | str] = None, settings=None,
                 request: Optional[Request] = None):
        self.cookie = load_credential(cookie)
        self.lang = parse_lang(lang or self.cookie.mi18n_lang)

        if request is None:
            raw = serialize_cookie(self.cookie)
            request = Request.from_settings(raw, settings) if settings is not None else Request(raw)
        self.request = request
        self.request.set_referer(REFERER)
        self.request.set_lang(self.lang)

        self.uid = int(uid) if uid is not None else None
        self.region = type(self).resolve_region(self.uid) if self.uid is not None else None

        self.daily = DailyModule(self.request, self.lang, self.GAME)
        self.redeem = RedeemModule(self.request, self.lang, self.GAME, self.region, self.uid)

    @classmethod
    def create(cls, cookie: Union[str, Credential], uid: Optional[int] = None,
               lang: Optional[LanguageEnum | str] = None, settings=None):
        """
        Igual que el constructor, pero si no hay uid lo busca en la cuenta
        de Hoyolab (la de más nivel para este juego).
        """
        if uid is None:
            account = Hoyolab(cookie, lang=lang, settings=settings).game_account(cls.GAME)
            uid = int(account["game_uid"])
        return cls(cookie, uid=uid, lang=lang, settings=settings)

    def __repr__(self):
        return f"{type(self).__name__}(uid={self.uid}, region={self.region}, lang={self.lang.value})"


class GenshinImpact(GameClient):
    GAME = GamesEnum.GENSHIN_IMPACT
    resolve_region = staticmethod(get_genshin_region)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.record = RecordModule(self.request, self.lang, self.region, self.uid)
        self.diary = DiaryModule(self.request, self.lang, self.region, self.uid)


class HonkaiStarRail(GameClient):
    GAME = GamesEnum.HONKAI_STAR_RAIL
    resolve_region = staticmethod(get_hsr_region)


class HonkaiImpact(GameClient):
    GAME = GamesEnum.HONKAI_IMPACT
    resolve_region = staticmethod(get_hi3_region)


CLIENTS: dict[GamesEnum, type[GameClient]] = {
    GamesEnum.GENSHIN_IMPACT: GenshinImpact,
    GamesEnum.HONKAI_STAR_RAIL: HonkaiStarRail,
    GamesEnum.HONKAI_IMPACT: HonkaiImpact,
}
