# check-in diario (info / recompensas / reclamar)

from __future__ import annotations
import calendar
import logging
import time
from datetime import date, datetime
from typing import Optional

from hoyolab.errors import HoyolabError
from hoyolab.games.enums import GamesEnum, parse_game
from hoyolab.language import LanguageEnum, parse_lang
from hoyolab.request.request import Request
from hoyolab.routes import DAILY_ROUTES

logger = logging.getLogger(__name__)

ALREADY_CLAIMED_RETCODE = -5003


def _days_in_month(today: date) -> int:
    return calendar.monthrange(today.year, today.month)[1]


class DailyModule:
    def __init__(self, request: Request, lang: LanguageEnum | str, game: GamesEnum | str):
        self.request = request
        self.lang = parse_lang(lang)
        self.game = parse_game(game)
        self.routes = DAILY_ROUTES[self.game]

    def _prepare(self) -> None:
        self.request.set_params({"lang": self.lang.value}).set_lang(self.lang)

    def info(self) -> dict:
        """Estado del check-in del mes (días firmados, si ya se firmó hoy...)."""
        self._prepare()
        res = dict(self.request.send(self.routes.info).get("data") or {})
        res.setdefault("first_bind", False)
        if "month_last_day" not in res:
            today = date.today()
            res["month_last_day"] = today.day == _days_in_month(today)
        res.setdefault("sign_cnt_missed", 0)
        res.setdefault("short_sign_day", 0)
        return res

    def rewards(self) -> dict:
        """Lista de recompensas del mes ('awards', una por día)."""
        self._prepare()
        res = dict(self.request.send(self.routes.reward).get("data") or {})
        res.setdefault("now", str(round(time.time())))
        res["biz"] = self.routes.biz
        res.setdefault("resign", False)
        return res

    def reward(self, day: Optional[int] = None) -> dict:
        """
        Recompensa de un día concreto (1..días del mes).
        day=None -> el día de hoy según 'now' del servidor.
        """
        response = self.rewards()
        now = response.get("now")
        # día y longitud del mes salen de la misma fecha del servidor
        ref = datetime.fromtimestamp(int(now)).date() if now else date.today()
        if day is None:
            day = ref.day

        awards = response.get("awards") or []
        if not (0 < day <= _days_in_month(ref)) or day > len(awards):
            raise HoyolabError(f"{day} is not a valid date in this month.")

        return {
            "month": response.get("month"),
            "now": response.get("now"),
            "biz": response.get("biz"),
            "resign": response.get("resign"),
            "award": awards[day - 1],
        }

    def claim(self) -> dict:
        """
        Firma el día. code 0 -> OK, -5003 -> ya firmado hoy, otro -> error del servidor.
        """
        self._prepare()
        response = self.request.send(self.routes.claim, "POST")
        info = self.info()
        reward = self.reward()

        retcode = response.get("retcode")
        status = response.get("message")
        data = response.get("data") or {}

        if retcode == ALREADY_CLAIMED_RETCODE:
            logger.info("[DAILY] %s: ya reclamado hoy", self.game.value)
            return {"status": status, "code": ALREADY_CLAIMED_RETCODE, "reward": reward, "info": info}

        if retcode == 0 and str(data.get("code", "")).lower() == "ok":
            logger.info("[DAILY] %s: reclamado OK", self.game.value)
            return {"status": status, "code": 0, "reward": reward, "info": info}

        logger.warning("[DAILY] %s: claim fallo retcode=%s (%s)", self.game.value, retcode, status)
        return {"status": status, "code": retcode, "reward": None, "info": info}
