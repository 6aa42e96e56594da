# diario de ingresos (protogemas / mora) de Genshin

from __future__ import annotations
from datetime import datetime
from enum import IntEnum
from typing import Optional

from hoyolab.errors import HoyolabError, MissingAccountContextError
from hoyolab.language import LanguageEnum, parse_lang
from hoyolab.request.request import Request
from hoyolab import routes

PAGE_SIZE = 100


class DiaryMonthEnum(IntEnum):
    CURRENT = 3
    ONE_MONTH_AGO = 2
    TWO_MONTH_AGO = 1


class DiaryEnum(IntEnum):
    PRIMOGEMS = 1
    MORA = 2


def _entry_time(entry: dict) -> datetime:
    try:
        return datetime.fromisoformat(str(entry.get("time", "")))
    except ValueError:
        return datetime.min


class DiaryModule:
    def __init__(self, request: Request, lang: LanguageEnum | str,
                 region: Optional[str], uid: Optional[int]):
        self.request = request
        self.lang = parse_lang(lang)
        self.region = region
        self.uid = uid

    def _check(self, month) -> DiaryMonthEnum:
        if not self.region or not self.uid:
            raise MissingAccountContextError("UID parameter is missing or failed to be filled")
        try:
            return DiaryMonthEnum(month)
        except ValueError:
            raise HoyolabError("The given month parameter is invalid !")

    def diaries(self, month: DiaryMonthEnum | int = DiaryMonthEnum.CURRENT) -> dict:
        """Resumen del mes (totales por categoría)."""
        month = self._check(month)
        self.request.set_params({
            "region": self.region,
            "uid": self.uid,
            "month": int(month),
        }).set_ds()
        return self.request.send(routes.DIARY_LIST).get("data")

    def detail(self, type: DiaryEnum | int, month: DiaryMonthEnum | int = DiaryMonthEnum.CURRENT) -> dict:
        """
        Movimientos del mes, todas las páginas juntas y ordenadas por fecha.
        Pide páginas de 100 hasta recibir una vacía.
        """
        month = self._check(month)
        try:
            type = DiaryEnum(type)
        except ValueError:
            raise HoyolabError("The given type parameter is invalid !")

        merged: dict = {"list": []}
        page = 1
        while True:
            self.request.set_params({
                "region": self.region,
                "uid": self.uid,
                "month": int(month),
                "type": int(type),
                "current_page": page,
                "page_size": PAGE_SIZE,
            }).set_ds()
            res = self.request.send(routes.DIARY_DETAIL).get("data") or {}
            for k in ("uid", "region", "optional_month", "nickname", "data_month", "current_page"):
                merged[k] = res.get(k)
            items = res.get("list") or []
            merged["list"].extend(items)
            if not items:
                break
            page += 1

        merged["list"].sort(key=_entry_time)
        return merged
