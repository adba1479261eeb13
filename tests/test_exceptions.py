"""Tests for the exception messages."""

import pytest

from pybluelink.exceptions import (
    BluelinkAuthenticationFailedError,
    BluelinkDecodeError,
    BluelinkExceptionError,
    BluelinkNotAuthenticatedError,
    BluelinkNotImplementedError,
    BluelinkNoVehicleFoundError,
    BluelinkUnknownBrandError,
)


@pytest.mark.parametrize(
    ("code", "message"),
    [
        (400, "BAD_REQUEST"),
        (401, "UNAUTHORIZED"),
        (403, "FORBIDDEN"),
        (502, "UNKNOWN_ERROR_502"),
        ("DEVICE_REGISTRATION_FAILED", "DEVICE_REGISTRATION_FAILED"),
    ],
)
def test_code_to_message(code, message):
    err = BluelinkExceptionError(code)
    assert err.code == code
    assert err.message == message
    assert str(err) == message


@pytest.mark.parametrize(
    ("cls", "message"),
    [
        (BluelinkUnknownBrandError, "UNKNOWN_BRAND"),
        (BluelinkNotAuthenticatedError, "NOT_AUTHENTICATED"),
        (BluelinkAuthenticationFailedError, "AUTHENTICATION_FAILED"),
        (BluelinkNoVehicleFoundError, "NO_VEHICLE_FOUND"),
        (BluelinkNotImplementedError, "NOT_IMPLEMENTED"),
        (BluelinkDecodeError, "DECODE_ERROR"),
    ],
)
def test_default_messages(cls, message):
    err = cls()
    assert isinstance(err, BluelinkExceptionError)
    assert err.code is None
    assert err.message == message
