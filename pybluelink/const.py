#  SPDX-License-Identifier: Apache-2.0
"""Constants for the Hyundai / Kia Bluelink API."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import NamedTuple

_LOGGER = logging.getLogger(__name__)

USER_AGENT = "okhttp/3.10.0"

#: seconds; the vendor backend is slow and occasionally hangs on status calls
DEFAULT_TIMEOUT = 45 * 60

API_CODE_OK = "S"

LANGUAGE = "en"


class StrEnum(str, Enum):
    """A string enumeration of type `(str, Enum)`. All members are compared via `upper()`."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        has_unknown = False
        for member in cls:
            if member.value.upper() == "UNKNOWN":
                has_unknown = True
            if member.value.upper() == value.upper():
                return member
        if has_unknown:
            _LOGGER.warning("'%s' is not a valid '%s'", value, cls.__name__)
            return cls.UNKNOWN
        return None


class Brand(StrEnum):
    """Vendor sub-backends sharing the same protocol."""

    HYUNDAI = "hyundai"
    KIA = "kia"


class Region(StrEnum):
    """Regions known to the vendor. Only the european backends are wired."""

    EU = "eu"
    US = "us"
    CA = "ca"
    UNKNOWN = "unknown"


class PlugType(IntEnum):
    """Plug types used in the target state of charge list."""

    AC = 0
    DC = 1


class BrandSettings(NamedTuple):
    """Per brand base URI and pre-shared identifiers."""

    uri: str
    service_id: str
    application_id: str
    token_auth: str


BRAND_SETTINGS = {
    Brand.HYUNDAI: BrandSettings(
        uri="https://prd.eu-ccapi.hyundai.com:8080",
        service_id="6d477c38-3ca4-4cf3-9557-2a1929a94654",
        application_id="99cfff84-f4e2-4be8-a5ed-e5b755eb6581",
        token_auth="NmQ0NzdjMzgtM2NhNC00Y2YzLTk1NTctMmExOTI5YTk0NjU0OktVeTQ5WHhQekxwTHVvSzB4aEJDNzdXNlZYaG10UVI5aVFobUlGampvWTRJcHhzVg==",
    ),
    Brand.KIA: BrandSettings(
        uri="https://prd.eu-ccapi.kia.com:8080",
        service_id="fdc85c00-0a2f-4c64-bcb4-2cfb1500730a",
        application_id="693a33fa-c117-43f2-ae3b-61a02d24f417",
        token_auth="ZmRjODVjMDAtMGEyZi00YzY0LWJjYjQtMmNmYjE1MDA3MzBhOnNlY3JldA==",
    ),
}


class Endpoints(NamedTuple):
    """API paths relative to the brand base URI."""

    device_id: str = "/api/v1/spa/notifications/register"
    authorize: str = "/api/v1/user/oauth2/authorize"
    redirect: str = "/api/v1/user/oauth2/redirect"
    lang: str = "/api/v1/user/language"
    login: str = "/api/v1/user/signin"
    access_token: str = "/api/v1/user/oauth2/token"
    vehicles: str = "/api/v1/spa/vehicles"
    status: str = "/api/v1/spa/vehicles/{vehicle_id}/status"
