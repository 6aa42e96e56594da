from __future__ import annotations
import logging
from typing import Optional

from hoyolab.errors import MissingAccountContextError
from hoyolab.games.enums import GamesEnum, parse_game
from hoyolab.language import LanguageEnum, parse_lang
from hoyolab.request.request import Request
from hoyolab.routes import REDEEM

logger = logging.getLogger(__name__)


def sanitize_code(code: str) -> str:
    # al copiar/pegar códigos a veces se cuela U+FFFD
    return code.replace("\ufffd", "")


class RedeemModule:
    def __init__(self, request: Request, lang: LanguageEnum | str, game: GamesEnum | str,
                 region: Optional[str], uid: Optional[int]):
        self.request = request
        self.lang = parse_lang(lang)
        self.game = parse_game(game)
        self.region = region
        self.uid = uid

    def claim(self, code: str) -> dict:
        """Canjea un código para la cuenta (uid + región) de este módulo."""
        if not self.region or not self.uid:
            raise MissingAccountContextError("UID parameter is missing or failed to be filled")

        self.request.set_params({
            "uid": self.uid,
            "region": self.region,
            "game_biz": self.game.value,
            "cdkey": sanitize_code(code),
            "lang": self.lang.value,
            "sLangKey": self.lang.value,
        })
        res = self.request.send(REDEEM)
        logger.info("[REDEEM] %s uid=%s retcode=%s", self.game.value, self.uid, res.get("retcode"))
        return res
