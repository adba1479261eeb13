"""Tests for the stamp pools."""

import logging

import pytest

from pybluelink import stamps
from pybluelink.const import Brand
from pybluelink.exceptions import BluelinkUnknownBrandError


@pytest.mark.parametrize("brand", list(Brand))
def test_pool_is_loaded(brand):
    assert len(stamps.STAMPS[brand]) > 0
    assert all(stamps.STAMPS[brand])


def test_pools_are_brand_specific():
    assert set(stamps.STAMPS[Brand.HYUNDAI]).isdisjoint(stamps.STAMPS[Brand.KIA])


@pytest.mark.parametrize("brand", list(Brand))
def test_draws_come_from_brand_pool(brand):
    """Every draw is a member of the brand's pool, repeats are allowed."""
    pool = set(stamps.STAMPS[brand])
    for _ in range(1000):
        assert stamps.get_stamp(brand) in pool


def test_brand_name_is_case_insensitive():
    assert stamps.get_stamp("KIA") in stamps.STAMPS[Brand.KIA]


@pytest.mark.parametrize("brand", ["genesis", None, ""])
def test_unknown_brand(brand):
    with pytest.raises(BluelinkUnknownBrandError):
        stamps.get_stamp(brand)


def test_empty_pool_fails_loudly(monkeypatch):
    monkeypatch.setitem(stamps.STAMPS, Brand.KIA, ())

    with pytest.raises(LookupError):
        stamps.get_stamp(Brand.KIA)


def test_load_pool_logs_size(caplog):
    caplog.set_level(logging.DEBUG, logger="pybluelink.stamps")

    pool = stamps._load_pool(Brand.KIA)

    assert pool == stamps.STAMPS[Brand.KIA]
    assert f"Loaded {len(pool)} stamps for kia" in caplog.text
