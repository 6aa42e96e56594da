# récords de jugador (Genshin): índice, personajes, abismo, notas diarias

from __future__ import annotations
from enum import IntEnum
from typing import Optional

from hoyolab.errors import HoyolabError, MissingAccountContextError
from hoyolab.language import LanguageEnum, parse_lang
from hoyolab.request.request import Request
from hoyolab import routes


class AbyssScheduleEnum(IntEnum):
    CURRENT = 1
    PREVIOUS = 2


class RecordModule:
    """
    Todas las llamadas van firmadas con DS y necesitan uid + región.
    """

    def __init__(self, request: Request, lang: LanguageEnum | str,
                 region: Optional[str], uid: Optional[int]):
        self.request = request
        self.lang = parse_lang(lang)
        self.region = region
        self.uid = uid

    def _require_account(self) -> None:
        if not self.region or not self.uid:
            raise MissingAccountContextError("UID parameter is missing or failed to be filled")

    def records(self) -> dict:
        self._require_account()
        self.request.set_params({
            "server": self.region,
            "role_id": self.uid,
            "lang": self.lang.value,
        }).set_ds(True)
        return self.request.send(routes.RECORD_INDEX).get("data")

    def characters(self) -> dict:
        self._require_account()
        self.request.set_body({
            "server": self.region,
            "role_id": self.uid,
        }).set_ds(True)
        return self.request.send(routes.RECORD_CHARACTER, "POST").get("data")

    def characters_summary(self, character_ids: list[int]) -> dict:
        self._require_account()
        self.request.set_body({
            "character_ids": list(character_ids),
            "role_id": self.uid,
            "server": self.region,
        }).set_ds()
        return self.request.send(routes.RECORD_AVATAR_BASIC_INFO, "POST").get("data")

    def spiral_abyss(self, schedule_type: AbyssScheduleEnum | int = AbyssScheduleEnum.CURRENT) -> dict:
        self._require_account()
        try:
            schedule_type = AbyssScheduleEnum(schedule_type)
        except ValueError:
            raise HoyolabError("The given scheduleType parameter is invalid !")
        self.request.set_params({
            "server": self.region,
            "role_id": self.uid,
            "schedule_type": int(schedule_type),
        }).set_ds()
        return self.request.send(routes.RECORD_SPIRAL_ABYSS).get("data")

    def daily_note(self) -> dict:
        """Resina, expediciones, encargos del día..."""
        self._require_account()
        self.request.set_params({
            "server": self.region,
            "role_id": self.uid,
        }).set_ds()
        return self.request.send(routes.RECORD_DAILY_NOTE).get("data")
