# cuentas de juego vinculadas a una cookie de Hoyolab

from __future__ import annotations
import logging
from typing import Optional, Union

from hoyolab.cookie.cookie import Credential, parse_cookie_string, serialize_cookie
from hoyolab.errors import HoyolabError
from hoyolab.games.enums import GamesEnum, parse_game
from hoyolab.language import LanguageEnum, parse_lang
from hoyolab.request.request import Request
from hoyolab.routes import GAMES_ACCOUNT

logger = logging.getLogger(__name__)


def load_credential(cookie: Union[str, Credential]) -> Credential:
    return parse_cookie_string(cookie) if isinstance(cookie, str) else cookie


class Hoyolab:
    def __init__(self, cookie: Union[str, Credential], lang: Optional[LanguageEnum | str] = None,
                 settings=None, request: Optional[Request] = None):
        self.cookie = load_credential(cookie)
        self.lang = parse_lang(lang or self.cookie.mi18n_lang)
        if request is None:
            raw = serialize_cookie(self.cookie)
            request = Request.from_settings(raw, settings) if settings is not None else Request(raw)
        self.request = request
        self.request.set_lang(self.lang)

    def games_list(self, game: Optional[GamesEnum | str] = None) -> list[dict]:
        """Roles de juego de la cuenta (opcionalmente de un solo juego)."""
        if game:
            self.request.set_params({"game_biz": parse_game(game).value})
        self.request.set_params({
            "uid": self.cookie.ltuid,
            "sLangKey": self.cookie.mi18n_lang,
        })
        res = self.request.send(GAMES_ACCOUNT)
        data = res.get("data")
        if not data or not data.get("list"):
            raise HoyolabError("There is no game account on this hoyolab account !")
        return data["list"]

    def game_account(self, game: GamesEnum | str) -> dict:
        """Cuenta de ese juego con más nivel."""
        games = self.games_list(game)
        best = max(games, key=lambda g: int(g.get("level") or 0))
        logger.info("[ACCOUNT] %s -> uid %s (nivel %s)", parse_game(game).value, best.get("game_uid"), best.get("level"))
        return best
