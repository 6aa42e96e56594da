#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# check-in diario (y canje opcional) con la cookie del .env

from __future__ import annotations
import logging
import sys

from hoyolab.config import load_settings
from hoyolab.errors import HoyolabError
from hoyolab.games.clients import CLIENTS
from hoyolab.games.enums import GamesEnum

logger = logging.getLogger("checkin")


def run_checkin(settings) -> int:
    """Devuelve el número de juegos con fallo (0 = todo bien)."""
    if not settings.HOYOLAB_COOKIE:
        logger.error("[CHECKIN] Falta HOYOLAB_COOKIE en .env")
        return 1

    lang = settings.HOYOLAB_LANG or None
    ok, fail = 0, 0
    details = []
    for game_biz in settings.HOYOLAB_GAMES:
        try:
            game = GamesEnum(game_biz)
        except ValueError:
            logger.error("[CHECKIN] Juego desconocido: %s", game_biz)
            fail += 1
            continue

        client_cls = CLIENTS[game]
        try:
            if settings.REDEEM_CODE:
                client = client_cls.create(settings.HOYOLAB_COOKIE, lang=lang, settings=settings)
            else:
                client = client_cls(settings.HOYOLAB_COOKIE, lang=lang, settings=settings)

            result = client.daily.claim()
            award = (result.get("reward") or {}).get("award") or {}
            details.append(f"{game.value}: code={result['code']} {award.get('name', '')} x{award.get('cnt', '')}")

            if settings.REDEEM_CODE:
                res = client.redeem.claim(settings.REDEEM_CODE)
                details.append(f"{game.value}: redeem retcode={res.get('retcode')} {res.get('message', '')}")
            ok += 1
        except HoyolabError as e:
            logger.error("[CHECKIN] %s: %s", game.value, e)
            details.append(f"{game.value}: FAIL - {e}")
            fail += 1

    logger.info("[CHECKIN] Terminado. OK=%d FAIL=%d\n%s", ok, fail, "\n".join(details))
    return fail


if __name__ == "__main__":
    try:
        settings = load_settings()
        logging.basicConfig(level=settings.LOG_LEVEL)
        sys.exit(1 if run_checkin(settings) else 0)
    except KeyboardInterrupt:
        pass
