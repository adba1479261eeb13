#  SPDX-License-Identifier: Apache-2.0
"""Session credentials and the header profiles built from them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .const import BRAND_SETTINGS, USER_AGENT, Brand
from .exceptions import BluelinkNotAuthenticatedError, BluelinkUnknownBrandError
from .stamps import get_stamp

_LOGGER = logging.getLogger(__name__)


@dataclass
class Auth:
    """Credentials of one session.

    `device_id` and `access_token` stay empty until a handshake succeeds. Only a
    non-empty `access_token` makes the session authenticated.
    """

    brand: Brand
    uri: str
    service_id: str
    application_id: str
    token_auth: str
    device_id: str = ""
    access_token: str = ""
    user_agent: str = USER_AGENT

    @classmethod
    def for_brand(cls, brand: Brand | str | None, user_agent: str = USER_AGENT) -> Auth:
        """Build unauthenticated credentials for a brand."""
        try:
            brand = Brand(brand)
        except ValueError as exc:
            raise BluelinkUnknownBrandError from exc

        settings = BRAND_SETTINGS[brand]
        return cls(
            brand=brand,
            uri=settings.uri,
            service_id=settings.service_id,
            application_id=settings.application_id,
            token_auth=settings.token_auth,
            user_agent=user_agent,
        )

    @property
    def is_authenticated(self) -> bool:
        """Return True if a bearer token is present."""
        return bool(self.access_token)

    def json_headers(self) -> dict[str, str]:
        """Headers for the unauthenticated setup calls."""
        return {"Content-Type": "application/json", "Accept": "application/json"}

    def device_headers(self) -> dict[str, str]:
        """Headers for the device registration call."""
        return {
            "ccsp-service-id": self.service_id,
            "Content-Type": "application/json;charset=UTF-8",
            "User-Agent": self.user_agent,
            "Stamp": get_stamp(self.brand),
        }

    def token_headers(self) -> dict[str, str]:
        """Headers for exchanging the authorization code."""
        return {
            "Authorization": f"Basic {self.token_auth}",
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": self.user_agent,
        }

    def bearer_headers(self) -> dict[str, str]:
        """Headers for vehicle calls, with a freshly drawn stamp."""
        if not self.is_authenticated:
            _LOGGER.debug("Refusing vehicle call for %s, no bearer token", self.brand.value)
            raise BluelinkNotAuthenticatedError

        return {
            "Authorization": self.access_token,
            "ccsp-device-id": self.device_id,
            "ccsp-application-id": self.application_id,
            "offset": "1",
            "User-Agent": self.user_agent,
            "Stamp": get_stamp(self.brand),
        }
