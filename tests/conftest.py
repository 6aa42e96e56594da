from unittest.mock import MagicMock

import pytest

from hoyolab.request.cache import Cache
from hoyolab.request.request import Request


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK"):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason
        self.text = ""

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def envelope(retcode=0, data=None, message="OK"):
    return {"retcode": retcode, "message": message, "data": data}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def no_delay(monkeypatch):
    """Sustituye la espera entre reintentos y registra cada llamada."""
    calls = []
    monkeypatch.setattr("hoyolab.request.request.delay", lambda s: calls.append(s))
    return calls


@pytest.fixture
def make_request(clock):
    """
    make_request(resp1, resp2, ...) -> (Request, session)
    Cada resp puede ser un dict (envelope 200), un FakeResponse o una excepción.
    """
    def _make(*responses, **kwargs):
        session = MagicMock()
        session.request.side_effect = [
            r if isinstance(r, (FakeResponse, Exception)) else FakeResponse(r)
            for r in responses
        ]
        req = Request("ltoken=abc; ltuid=123", Cache(clock=clock), session=session, **kwargs)
        return req, session
    return _make
