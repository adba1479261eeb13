#  SPDX-License-Identifier: Apache-2.0
"""Configuration for a Bluelink session."""

from __future__ import annotations

from typing import NamedTuple

import httpx

from .const import DEFAULT_TIMEOUT, USER_AGENT, Brand, Region


class Config(NamedTuple):
    """Account data needed to open a session.

    :param username: account email
    :param password: account password
    :param pin: vehicle pin, only needed for remote commands
    :param brand: `Brand` or its name, case insensitive
    :param region: `Region` or its name, unknown values map to `Region.UNKNOWN`
    """

    username: str
    password: str
    pin: str = ""
    brand: Brand | str | None = None
    region: Region | str = Region.EU


class ClientOptions(NamedTuple):
    """Transport options used when the connection creates its own http client.

    :param timeout: request timeout in seconds, defaults to 45 minutes
    :param transport: httpx transport, e.g. a mock transport for testing
    :param user_agent: value of the User-Agent header on vendor calls
    """

    timeout: float = DEFAULT_TIMEOUT
    transport: httpx.AsyncBaseTransport | None = None
    user_agent: str = USER_AGENT
