import re

import pytest
import requests

from hoyolab.errors import HoyolabError, TransportError, RateLimitedRetryExhausted
from hoyolab.language import LanguageEnum
from hoyolab.request.request import Request, SENTINEL_RETCODE

from conftest import FakeResponse, envelope

URL = "https://example.test/api"


def test_default_headers_include_cookie_and_markers():
    req = Request("ltoken=abc; ltuid=123")
    assert req.headers["Cookie"] == "ltoken=abc; ltuid=123"
    assert req.headers["Content-Type"] == "application/json"
    assert req.headers["x-rpc-client_type"] == "5"
    assert req.headers["x-rpc-app_version"] == "1.5.0"
    assert req.headers["x-rpc-language"] == "en-us"
    assert "User-Agent" in req.headers


def test_setters_chain_and_merge():
    req = Request()
    same = (req.set_referer("https://act.hoyolab.com")
               .set_params({"a": 1})
               .set_params({"b": 2})
               .set_body({"x": 1})
               .set_body({"y": 2})
               .set_lang(LanguageEnum.JAPANESE)
               .set_ds())
    assert same is req
    assert req.headers["Referer"] == req.headers["Origin"] == "https://act.hoyolab.com"
    assert req.params == {"a": 1, "b": 2}
    assert req.body == {"x": 1, "y": 2}
    assert req.headers["x-rpc-language"] == "ja-jp"
    assert req.ds is True


def test_get_sends_params_without_body(make_request):
    req, session = make_request(envelope(data={"ok": 1}))
    req.set_params({"lang": "en-us"}).set_body({"ignored": True})
    res = req.send(URL)
    assert res["data"] == {"ok": 1}
    method, url = session.request.call_args.args
    kwargs = session.request.call_args.kwargs
    assert (method, url) == ("GET", URL)
    assert kwargs["params"] == {"lang": "en-us"}
    assert "json" not in kwargs


def test_post_sends_body_then_clears_it(make_request):
    req, session = make_request(envelope(), envelope(message="second"))
    req.set_params({"lang": "en-us"}).set_body({"role_id": 1})
    req.send(URL, "POST")
    assert session.request.call_args.kwargs["json"] == {"role_id": 1}
    assert req.body == {}
    assert req.params == {"lang": "en-us"}

    req.send(URL, "POST")
    assert session.request.call_args.kwargs["json"] == {}


def test_cached_response_skips_transport(make_request):
    req, session = make_request(envelope(data={"n": 1}), envelope(data={"n": 2}))
    first = req.send(URL)
    second = req.send(URL)
    assert first == second == envelope(data={"n": 1})
    assert session.request.call_count == 1


def test_cache_expires_after_ttl(make_request, clock):
    req, session = make_request(envelope(data={"n": 1}), envelope(data={"n": 2}))
    req.send(URL, ttl=10)
    clock.advance(9)
    assert req.send(URL, ttl=10)["data"] == {"n": 1}
    clock.advance(2)
    assert req.send(URL, ttl=10)["data"] == {"n": 2}
    assert session.request.call_count == 2


def test_different_params_are_different_cache_entries(make_request):
    req, session = make_request(envelope(data=1), envelope(data=2))
    req.set_params({"page": 1})
    assert req.send(URL)["data"] == 1
    req.set_params({"page": 2})
    assert req.send(URL)["data"] == 2
    assert session.request.call_count == 2


def test_ds_header_attached_per_attempt(make_request):
    req, session = make_request(envelope())
    req.set_ds()
    req.send(URL)
    ds = session.request.call_args.kwargs["headers"]["DS"]
    assert re.fullmatch(r"\d+,[A-Za-z]{6},[0-9a-f]{32}", ds)


def test_no_ds_header_by_default(make_request):
    req, session = make_request(envelope())
    req.send(URL)
    assert "DS" not in session.request.call_args.kwargs["headers"]


def test_rate_limited_response_is_retried(make_request, no_delay):
    req, session = make_request(envelope(-2016), envelope(-2016), envelope(0, data="done"))
    res = req.send(URL)
    assert res["data"] == "done"
    assert session.request.call_count == 3
    assert no_delay == [1.0, 1.0]


def test_rate_limit_gives_up_after_sixty_retries(make_request, no_delay):
    req, session = make_request(*[envelope(-2016)] * 61)
    res = req.send(URL)
    assert res["retcode"] == -2016
    assert session.request.call_count == 61
    assert len(no_delay) == 60


def test_retry_counter_is_fresh_for_each_send(make_request, no_delay):
    responses = [envelope(-2016)] * 3 + [envelope(0)] + [envelope(-2016)] * 3 + [envelope(0)]
    req, session = make_request(*responses, max_retries=3)
    req.set_params({"call": 1})
    assert req.send(URL)["retcode"] == 0
    req.set_params({"call": 2})
    assert req.send(URL)["retcode"] == 0
    assert session.request.call_count == 8


def test_exhausted_retries_can_raise(make_request, no_delay):
    req, _ = make_request(*[envelope(-2016)] * 3, max_retries=2, raise_on_exhausted=True)
    with pytest.raises(RateLimitedRetryExhausted) as exc:
        req.send(URL)
    assert exc.value.response["retcode"] == -2016


def test_retried_final_response_keeps_ttl(make_request, no_delay, clock):
    req, session = make_request(envelope(-2016), envelope(0, data=1), envelope(0, data=2))
    req.send(URL, ttl=100)
    clock.advance(50)
    assert req.send(URL, ttl=100)["data"] == 1
    assert session.request.call_count == 2


def test_http_error_status_raises_transport_error(make_request, no_delay):
    req, session = make_request(FakeResponse(envelope(), status_code=500, reason="Server Error"))
    with pytest.raises(TransportError) as exc:
        req.send(URL)
    assert exc.value.status_code == 500
    assert "Server Error" in str(exc.value)
    assert session.request.call_count == 1
    assert no_delay == []


def test_transport_exception_is_wrapped(make_request):
    req, _ = make_request(requests.ConnectionError("boom"))
    with pytest.raises(TransportError) as exc:
        req.send(URL)
    assert exc.value.code == "ConnectionError"
    assert "boom" in str(exc.value)


def test_unexpected_error_is_raised_by_default(make_request):
    req, _ = make_request(FakeResponse(ValueError("not json")))
    with pytest.raises(HoyolabError):
        req.send(URL)


def test_legacy_mode_returns_sentinel_envelope(make_request):
    req, _ = make_request(FakeResponse(ValueError("not json")), legacy_errors=True)
    res = req.send(URL)
    assert res == {"retcode": SENTINEL_RETCODE, "message": "", "data": None}


def test_transport_error_not_swallowed_in_legacy_mode(make_request):
    req, _ = make_request(FakeResponse(envelope(), status_code=403, reason="Forbidden"), legacy_errors=True)
    with pytest.raises(TransportError):
        req.send(URL)


def test_ds_header_dropped_when_signing_is_turned_off(make_request):
    req, session = make_request(envelope(data=1), envelope(data=2))
    req.set_ds().send(URL)
    assert "DS" in session.request.call_args_list[0].kwargs["headers"]

    req.set_ds(False).set_params({"other": 1}).send(URL)
    assert "DS" not in session.request.call_args_list[1].kwargs["headers"]
    assert "DS" not in req.headers
