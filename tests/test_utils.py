"""Tests for nested payload lookups."""

from pybluelink.utils import get_child_value

DATA = {
    "resMsg": {
        "doorLock": False,
        "evStatus": {
            "drvDistance": [{"rangeByFuel": {"evModeRange": {"value": 120}}}],
            "time": None,
        },
    },
}


def test_nested_dict_and_list():
    assert get_child_value(DATA, "resMsg.evStatus.drvDistance.0.rangeByFuel.evModeRange.value") == 120


def test_falsy_value_is_returned():
    assert get_child_value(DATA, "resMsg.doorLock", True) is False


def test_missing_parts_return_default():
    assert get_child_value(DATA, "resMsg.airTemp.value") is None
    assert get_child_value(DATA, "resMsg.evStatus.drvDistance.3.type", 0) == 0
    assert get_child_value(DATA, "resMsg.doorLock.value", "x") == "x"
    assert get_child_value(None, "resMsg", {}) == {}


def test_null_returns_default():
    assert get_child_value(DATA, "resMsg.evStatus.time", "") == ""
