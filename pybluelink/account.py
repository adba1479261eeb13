#  SPDX-License-Identifier: Apache-2.0
"""Accesses a Bluelink account and retrieves connected vehicles."""

from __future__ import annotations

import logging

from pybluelink.config import ClientOptions, Config
from pybluelink.connection import Connection
from pybluelink.const import API_CODE_OK
from pybluelink.exceptions import (
    BluelinkExceptionError,
    BluelinkNoVehicleFoundError,
    BluelinkNotAuthenticatedError,
)
from pybluelink.utils import get_child_value
from pybluelink.vehicle import BluelinkVehicle

_LOGGER = logging.getLogger(__name__)


class BluelinkAccount:
    """Establishes a connection to a Bluelink account."""

    def __init__(
        self,
        config: Config | None = None,
        options: ClientOptions | None = None,
        connection: Connection | None = None,
    ) -> None:
        """Initialize the account.

        Either `config` or a ready `connection` is required.
        """
        if connection is None:
            if config is None:
                raise BluelinkExceptionError("MISSING_CONFIG")
            self.connection = Connection(config, options)
        else:
            self.connection = connection

    async def authenticate(self) -> None:
        """Log into the account."""
        await self.connection.authenticate()

    async def get_vehicles(self) -> list[BluelinkVehicle]:
        """Retrieve the vehicles bound to the account."""
        _LOGGER.debug("Retrieving vehicle list")

        resp = await self.connection.get(self.connection.endpoints.vehicles)
        # the backend reports every failure with the same code
        if get_child_value(resp, "retCode") != API_CODE_OK:
            raise BluelinkNotAuthenticatedError

        vehicle_list = get_child_value(resp, "resMsg.vehicles", [])
        if len(vehicle_list) == 0:
            raise BluelinkNoVehicleFoundError

        vehicles = []
        for vehicle in vehicle_list:
            _LOGGER.debug("Got vehicle %s", vehicle)
            vehicles.append(BluelinkVehicle(connection=self.connection, data=vehicle))
        return vehicles

    async def get_vehicle(self, vin: str) -> BluelinkVehicle | None:
        """Retrieve a vehicle by VIN."""
        filtered = [v for v in await self.get_vehicles() if v.vin == vin]
        if len(filtered) > 0:
            return filtered[0]
        return None

    async def close(self) -> None:
        """Close the connection to the backend."""
        await self.connection.close()
