#  SPDX-License-Identifier: Apache-2.0
"""Remote services on a vehicle.

None of the commands are wired to the backend yet, each one raises
`BluelinkNotImplementedError` without touching the network.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import BluelinkNotImplementedError

if TYPE_CHECKING:
    from .vehicle import BluelinkVehicle

_LOGGER = logging.getLogger(__name__)


class RemoteServices:
    """Trigger remote services on a vehicle."""

    def __init__(self, vehicle: BluelinkVehicle):
        """Initialise the Remote Services on a Bluelink vehicle."""
        self._vehicle = vehicle

    async def unlock(self):
        """Remote service for unlocking the doors."""
        _LOGGER.debug("Unlock requested for vehicle %s", self._vehicle.vin)
        raise BluelinkNotImplementedError

    async def lock(self):
        """Remote service for locking the doors."""
        _LOGGER.debug("Lock requested for vehicle %s", self._vehicle.vin)
        raise BluelinkNotImplementedError

    async def start(self, **options):
        """Remote service for starting climatisation."""
        _LOGGER.debug("Start requested for vehicle %s with %s", self._vehicle.vin, options)
        raise BluelinkNotImplementedError

    async def stop(self):
        """Remote service for stopping climatisation."""
        _LOGGER.debug("Stop requested for vehicle %s", self._vehicle.vin)
        raise BluelinkNotImplementedError
