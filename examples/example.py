"""Example code for using the pybluelink library."""

import asyncio
import contextlib
import logging
from sys import argv

from pybluelink.account import BluelinkAccount
from pybluelink.config import Config

logging.basicConfig()

# Invoke like this: python ./examples/example.py <your email> <your password> <hyundai|kia>
# By default the root logger is set to WARNING and all loggers you define
# inherit that value. Here we set the root logger to NOTSET. This logging
# level is automatically inherited by all existing and new sub-loggers
# that do not set a less verbose level.

logging.root.setLevel(logging.DEBUG)

email = argv[1]
password = argv[2]
brand = argv[3]


async def vehicles() -> None:
    """Log in, then print name, VIN and battery status of every vehicle."""
    account = BluelinkAccount(Config(email, password, brand=brand))
    await account.authenticate()

    for vehicle in await account.get_vehicles():
        status = await vehicle.get_status()
        print(
            f"VIN: {vehicle.vin}, Name: {vehicle.name}, SoC: {status.battery_soc}%, "
            f"Range: {status.range_left} km, Max range: {status.max_range} km",
        )

    await account.close()


if __name__ == "__main__":
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    with contextlib.suppress(KeyboardInterrupt):
        loop.run_until_complete(vehicles())
