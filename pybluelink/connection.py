#  SPDX-License-Identifier: Apache-2.0
"""Python Package for talking to the Hyundai / Kia Bluelink API."""

from __future__ import annotations

import logging

import httpx

from .auth import Auth
from .config import ClientOptions, Config
from .const import Brand, Endpoints, Region
from .exceptions import BluelinkNotAuthenticatedError
from .oauth2 import Credentials, OAuth2Client

_LOGGER = logging.getLogger(__name__)

# bodies carrying the password or the authorization code
_REDACTED_PATHS = (Endpoints().login, Endpoints().access_token)


async def log_request(request):
    """Provide formatting for http logging."""
    _LOGGER.debug("Request headers: %s", request.headers)
    _LOGGER.debug("Request method - url: %s %s", request.method, request.url)
    if request.url.path in _REDACTED_PATHS:
        _LOGGER.debug("Request body: <redacted>")
    else:
        _LOGGER.debug("Request body: %s", request.content)


async def log_response(response):
    """Log the status of every response."""
    _LOGGER.debug("Response status - url: %s %s", response.status_code, response.url)


class Connection:
    """Handles authentication and connecting to the Bluelink API.

    :param config: account configuration, the brand selects the backend
    :param options: transport options, ignored if `async_client` is given
    :param async_client: httpx.AsyncClient or None
    """

    def __init__(
        self,
        config: Config,
        options: ClientOptions | None = None,
        async_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the connection to the Bluelink API."""
        if options is None:
            options = ClientOptions()
        self.config = config
        # raises before any client is created
        self.auth = Auth.for_brand(config.brand, options.user_agent)
        self.region = Region(config.region)
        self.endpoints = Endpoints()

        if async_client is None:
            async_client = httpx.AsyncClient(
                transport=options.transport,
                timeout=options.timeout,
                event_hooks={"request": [log_request], "response": [log_response]},
            )
        self.asyncClient = async_client

        self.oauth2_client = OAuth2Client(
            self.asyncClient,
            self.auth,
            self.endpoints,
            Credentials(config.username, config.password),
        )

    @property
    def brand(self) -> Brand:
        """Return the brand of the backend this connection talks to."""
        return self.auth.brand

    @property
    def is_authenticated(self) -> bool:
        """Return True if the session holds a bearer token."""
        return self.auth.is_authenticated

    async def authenticate(self) -> None:
        """Run the login handshake, replacing any previous session."""
        await self.oauth2_client.authenticate()

    def build_request(self, method, url, **kwargs) -> httpx.Request:
        """Build an authenticated request to the Bluelink API."""
        return self.asyncClient.build_request(
            method,
            f"{self.auth.uri}{url}",
            headers=self.auth.bearer_headers(),
            **kwargs,
        )

    async def get(self, url, params=None):
        """Make a GET request to the Bluelink API."""
        return await self.request("GET", url, params=params)

    async def request(self, method, url, **kwargs):
        """Send an authenticated request and return the decoded envelope."""
        req = self.build_request(method, url, **kwargs)
        resp = await self.asyncClient.send(req)
        if resp.status_code in (401, 403):
            raise BluelinkNotAuthenticatedError(resp.status_code)
        return resp.json()

    async def close(self):
        """Close the asyncClient connection."""
        await self.asyncClient.aclose()
