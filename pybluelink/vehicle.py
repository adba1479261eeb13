#  SPDX-License-Identifier: Apache-2.0
"""Models a Bluelink vehicle and its status."""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .const import API_CODE_OK, Brand, PlugType
from .exceptions import BluelinkNotAuthenticatedError, BluelinkNotImplementedError
from .remote_services import RemoteServices
from .utils import get_child_value

if TYPE_CHECKING:
    from .connection import Connection

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class VehicleStatus:
    """Snapshot of the vehicle state at the time it was fetched."""

    updated_at: datetime.datetime
    door_is_locked: bool
    is_charging: bool
    battery_soc: int
    range_left: int
    target_soc_ac: int
    target_soc_dc: int
    plug_state: int  # 0 == unplugged

    @property
    def max_range(self) -> int:
        """Return the range extrapolated to a full battery.

        The quotient is truncated before scaling, e.g. 149 km at 50% gives 200.
        """
        if self.battery_soc <= 0:
            return 0
        return self.range_left // self.battery_soc * 100

    @classmethod
    def from_response(cls, payload, updated_at: datetime.datetime | None = None) -> VehicleStatus:
        """Decode the fields we need from a status envelope.

        Unknown or missing fields are tolerated. The vendor's own `time` field
        is not used, `updated_at` defaults to now.
        """
        if not isinstance(payload, dict) or payload.get("retCode") != API_CODE_OK:
            _LOGGER.debug("Status request rejected: %s", payload)
            raise BluelinkNotAuthenticatedError

        if updated_at is None:
            updated_at = datetime.datetime.now(datetime.timezone.utc)

        res = payload.get("resMsg") or {}
        ev = get_child_value(res, "evStatus", {})

        target_soc = {PlugType.AC: 0, PlugType.DC: 0}
        for target in get_child_value(ev, "reservChargeInfos.targetSOClist", []):
            plug_type = get_child_value(target, "plugType")
            if plug_type not in (PlugType.AC, PlugType.DC):
                continue
            # the vendor gives no ordering guarantee, the last entry wins
            target_soc[PlugType(plug_type)] = int(get_child_value(target, "targetSOClevel", 0))

        return cls(
            updated_at=updated_at,
            door_is_locked=bool(get_child_value(res, "doorLock", False)),
            is_charging=bool(get_child_value(ev, "batteryCharge", False)),
            battery_soc=int(get_child_value(ev, "batteryStatus", 0)),
            range_left=int(get_child_value(ev, "drvDistance.0.rangeByFuel.evModeRange.value", 0)),
            target_soc_ac=target_soc[PlugType.AC],
            target_soc_dc=target_soc[PlugType.DC],
            plug_state=int(get_child_value(ev, "batteryPlugin", 0)),
        )


class BluelinkVehicle:
    """Representation of a Bluelink vehicle.

    The vehicle reads credentials from the connection that listed it and must
    not outlive it.
    """

    def __init__(
        self,
        connection: Connection,
        data: dict | None = None,
    ) -> None:
        """Initialise the Bluelink Vehicle."""
        if data is None:
            data = {}
        self.connection = connection
        self.data = data
        self.remote_services = RemoteServices(self)

    @property
    def id(self) -> str:
        """Get the backend identifier of the vehicle."""
        return self.data.get("vehicleId", "")

    @property
    def vin(self) -> str:
        """Get the VIN (vehicle identification number) of the vehicle."""
        return self.data.get("vin", "")

    @property
    def name(self) -> str:
        """Get the name of the vehicle."""
        return self.data.get("vehicleName", "")

    @property
    def type(self) -> str:
        """Get the vehicle type, e.g. EV."""
        return self.data.get("type", "")

    @property
    def nickname(self) -> str:
        """Get the nickname the owner gave the vehicle."""
        return self.data.get("nickname", "")

    @property
    def model_name(self) -> str:
        """Get the model name, e.g. KONA EV."""
        return get_child_value(self.data, "detailInfo.saleCarmdlEnNm", "")

    @property
    def brand(self) -> Brand:
        """Get the brand of the backend the vehicle was listed from."""
        return self.connection.brand

    async def get_status(self) -> VehicleStatus:
        """Fetch and decode the current vehicle status."""
        _LOGGER.debug("Getting status for vehicle %s", self.vin)
        payload = await self.connection.get(
            self.connection.endpoints.status.format(vehicle_id=self.id),
        )
        return VehicleStatus.from_response(payload)

    async def get_location(self):
        """Get the location of the vehicle. Not supported yet."""
        raise BluelinkNotImplementedError

    async def get_odometer(self):
        """Get the odometer reading. Not supported yet."""
        raise BluelinkNotImplementedError

    def __repr__(self) -> str:
        """Return a printable representation of the Bluelink Vehicle object."""
        return f"Vehicle({self.vin!r}, name={self.name!r}, type={self.type!r}, brand={self.brand.value!r})"
