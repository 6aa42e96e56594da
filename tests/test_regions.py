import pytest

from hoyolab.errors import InvalidIdentifierError
from hoyolab.games.regions import get_genshin_region, get_hsr_region, get_hi3_region


@pytest.mark.parametrize("uid, region", [
    (601234567, "os_usa"),
    (701234567, "os_euro"),
    (801234567, "os_asia"),
    (901234567, "os_cht"),
    ("  701234567 ", "os_euro"),
])
def test_genshin_regions(uid, region):
    assert get_genshin_region(uid) == region


@pytest.mark.parametrize("uid", [101234567, 501234567, 12345678])
def test_genshin_invalid_uid(uid):
    with pytest.raises(InvalidIdentifierError):
        get_genshin_region(uid)


@pytest.mark.parametrize("uid, region", [
    (600000001, "prod_official_usa"),
    (700000001, "prod_official_euro"),
    (800000001, "prod_official_asia"),
    (900000001, "prod_official_cht"),
])
def test_hsr_regions(uid, region):
    assert get_hsr_region(uid) == region


def test_hsr_invalid_uid():
    with pytest.raises(InvalidIdentifierError):
        get_hsr_region(100000001)


@pytest.mark.parametrize("uid, region", [
    (10000001, "overseas01"),
    (99999999, "overseas01"),
    (100000001, "usa01"),
    (200000001, "eur01"),
])
def test_hi3_regions(uid, region):
    assert get_hi3_region(uid) == region


@pytest.mark.parametrize("uid", [10000000, 100000000, 200000000, 300000000, 999, 400000000, "abc"])
def test_hi3_invalid_uid(uid):
    with pytest.raises(InvalidIdentifierError):
        get_hi3_region(uid)
