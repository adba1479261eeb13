#  SPDX-License-Identifier: Apache-2.0
"""Exceptions used for the Bluelink API."""


class BluelinkExceptionError(Exception):
    """Class of Bluelink API exceptions."""

    default_message = ""

    def __init__(self, code=None, *args) -> None:
        """Initialize exceptions for the Bluelink API."""
        self.code = code
        self.message = self.default_message
        if isinstance(code, str):
            self.message = code
        elif code == 400:
            self.message = "BAD_REQUEST"
        elif code == 401:
            self.message = "UNAUTHORIZED"
        elif code == 403:
            self.message = "FORBIDDEN"
        elif code == 404:
            self.message = "NOT_FOUND"
        elif code == 429:
            self.message = "TOO_MANY_REQUESTS"
        elif code == 500:
            self.message = "SERVER_ERROR"
        elif code == 503:
            self.message = "SERVICE_MAINTENANCE"
        elif code == 504:
            self.message = "UPSTREAM_TIMEOUT"
        elif isinstance(code, int) and code > 299:
            self.message = f"UNKNOWN_ERROR_{code}"
        super().__init__(self.message, *args)


class BluelinkUnknownBrandError(BluelinkExceptionError):
    """Brand not supported by this library."""

    default_message = "UNKNOWN_BRAND"


class BluelinkNotAuthenticatedError(BluelinkExceptionError):
    """Session has no bearer token or the backend rejected it."""

    default_message = "NOT_AUTHENTICATED"


class BluelinkAuthenticationFailedError(BluelinkExceptionError):
    """A step of the login handshake was rejected."""

    default_message = "AUTHENTICATION_FAILED"


class BluelinkNoVehicleFoundError(BluelinkExceptionError):
    """The account has no vehicles."""

    default_message = "NO_VEHICLE_FOUND"


class BluelinkNotImplementedError(BluelinkExceptionError):
    """Remote service not implemented."""

    default_message = "NOT_IMPLEMENTED"


class BluelinkDecodeError(BluelinkExceptionError):
    """Response is missing a required field."""

    default_message = "DECODE_ERROR"
