#  SPDX-License-Identifier: Apache-2.0
"""Session handshake for the Bluelink API."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, NamedTuple
from urllib.parse import parse_qs, urlparse

import httpx

from .const import API_CODE_OK, LANGUAGE
from .exceptions import BluelinkAuthenticationFailedError, BluelinkDecodeError
from .utils import get_child_value

if TYPE_CHECKING:
    from .auth import Auth
    from .const import Endpoints

_LOGGER = logging.getLogger(__name__)


class Credentials(NamedTuple):
    """Store credentials for the Bluelink API."""

    email: str
    password: str


class OAuth2Client:
    """Utility class to log into a Bluelink account.

    :param client: httpx.AsyncClient, its cookie jar carries the pending authorization
    :param auth: session credentials, updated in place
    :param endpoints: API paths
    :param credentials: tuple of email, password
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        auth: Auth,
        endpoints: Endpoints,
        credentials: Credentials,
    ):
        """Initialise the oauth2 client."""
        self.client = client
        self.auth = auth
        self.endpoints = endpoints
        self.credentials = credentials

    @property
    def redirect_uri(self) -> str:
        """Return the redirect URI registered for the brand."""
        return f"{self.auth.uri}{self.endpoints.redirect}"

    async def authenticate(self) -> None:
        """Log in and store device id and bearer token.

        Runs these steps in order, any failure aborts the handshake:

        1. Reset cookies and credentials from a previous session
        2. Register a device to get a device id
        3. GET the authorize URL to seed the session cookies
        4. POST the language preference
        5. POST email and password, get the authorization code
        6. Exchange the authorization code for an access token
        """
        _LOGGER.debug("Authenticating with %s backend.", self.auth.brand.value)
        self.reset_session()

        self.auth.device_id = await self.register_device()
        await self.prime_cookies()
        await self.set_language(LANGUAGE)
        authorization_code = await self.login()
        self.auth.access_token = await self.fetch_access_token(authorization_code)

        _LOGGER.debug("Authenticated, device id %s", self.auth.device_id)

    def reset_session(self) -> None:
        """Drop cookies and credentials of a previous session."""
        self.client.cookies.clear()
        self.auth.device_id = ""
        self.auth.access_token = ""

    async def register_device(self) -> str:
        """Register a new device and return its id."""
        data = {
            "pushRegId": "1",
            "pushType": "GCM",
            "uuid": str(uuid.uuid1()),
        }

        _LOGGER.debug("Registering device.")
        resp = await self.client.post(
            f"{self.auth.uri}{self.endpoints.device_id}",
            json=data,
            headers=self.auth.device_headers(),
        )
        if resp.status_code != 200:
            raise BluelinkAuthenticationFailedError(resp.status_code)

        payload = resp.json()
        if get_child_value(payload, "retCode") != API_CODE_OK:
            msg = "DEVICE_REGISTRATION_FAILED"
            raise BluelinkAuthenticationFailedError(msg)

        device_id = get_child_value(payload, "resMsg.deviceId")
        if not device_id:
            msg = "MISSING_DEVICE_ID"
            raise BluelinkDecodeError(msg)
        return device_id

    async def prime_cookies(self) -> None:
        """GET the authorize URL so the backend sets its session cookies."""
        url = (
            f"{self.auth.uri}{self.endpoints.authorize}"
            f"?response_type=code&state=test&client_id={self.auth.service_id}"
            f"&redirect_uri={self.redirect_uri}"
        )

        _LOGGER.debug("Fetching session cookies.")
        await self.client.get(url, follow_redirects=True)

    async def set_language(self, lang: str) -> None:
        """Set the account language, the response is ignored."""
        await self.client.post(
            f"{self.auth.uri}{self.endpoints.lang}",
            json={"lang": lang},
            headers=self.auth.json_headers(),
        )

    async def login(self) -> str:
        """Submit email and password and return the authorization code."""
        data = {
            "email": self.credentials.email,
            "password": self.credentials.password,
        }

        _LOGGER.debug("Submitting credentials to login endpoint.")
        resp = await self.client.post(
            f"{self.auth.uri}{self.endpoints.login}",
            json=data,
            headers=self.auth.json_headers(),
        )

        # In case of wrong credentials, the response code is 400 (Bad request)
        if not resp.is_success:
            _LOGGER.debug("Invalid credentials.")
            raise BluelinkAuthenticationFailedError(resp.status_code)

        redirect_url = get_child_value(resp.json(), "redirectUrl")
        _LOGGER.debug("Redirected to %s", redirect_url)
        return self._extract_code(redirect_url)

    def _extract_code(self, url) -> str:
        """Extract the authorization code from the redirect URL.

        :param url: redirect URL returned by the login endpoint
        :return: value of the code query parameter
        """
        if not isinstance(url, str) or not url:
            msg = "MISSING_REDIRECT_URL"
            raise BluelinkDecodeError(msg)

        code = parse_qs(urlparse(url).query).get("code", [None])[0]
        if not code:
            msg = "INVALID_REDIRECT_URL"
            raise BluelinkDecodeError(msg)
        return code

    async def fetch_access_token(self, authorization_code: str) -> str:
        """Exchange the authorization code for a bearer credential.

        :param authorization_code: code from the login redirect
        :return: "<token_type> <access_token>"
        """
        data = {
            "grant_type": "authorization_code",
            "redirect_uri": self.redirect_uri,
            "code": authorization_code,
        }

        try:
            _LOGGER.debug("Exchanging the authorization code for an access token.")
            resp = await self.client.post(
                f"{self.auth.uri}{self.endpoints.access_token}",
                data=data,
                headers=self.auth.token_headers(),
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BluelinkAuthenticationFailedError(exc.response.status_code) from exc

        tokens = resp.json()
        access_token = get_child_value(tokens, "access_token")
        if not access_token:
            msg = "MISSING_ACCESS_TOKEN"
            raise BluelinkDecodeError(msg)
        return f"{get_child_value(tokens, 'token_type', '')} {access_token}"
