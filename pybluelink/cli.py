#!/usr/bin/python
#  SPDX-License-Identifier: Apache-2.0

"""Command line interface for Bluelink API functions."""

import argparse
import asyncio
import configparser
import dataclasses
import logging
import sys
from getpass import getpass
from pathlib import Path

from rich.console import Console

from pybluelink.account import BluelinkAccount
from pybluelink.config import ClientOptions, Config
from pybluelink.const import DEFAULT_TIMEOUT
from pybluelink.exceptions import BluelinkExceptionError

vehicle_commands = {
    "battery": "Prints the main battery level",
    "charging": "Check if the vehicle is charging",
    "location": "Show location of vehicle",
    "lock": "Lock vehicle",
    "locked": "Check if the doors are locked",
    "max_range": "Range extrapolated to a full battery",
    "odometer": "Show odometer reading",
    "range": "Remaining electric range",
    "start": "Start remote climatisation",
    "status": "Get current status of vehicle",
    "stop": "Stop remote climatisation",
    "target_soc": "Target state of charge for AC and DC charging",
    "unlock": "Unlock vehicle",
}

# subcommands whose function name differs from the command
command_functions = {"range": "range_left"}

console = Console()
printc = console.print

logging.basicConfig()
logging.root.setLevel(logging.WARNING)

_LOGGER = logging.getLogger(__name__)


async def battery(vehicle, _args):
    """Get vehicle battery state of charge (%)."""
    status = await vehicle.get_status()
    return status.battery_soc


async def charging(vehicle, _args):
    """Get vehicle charging state."""
    status = await vehicle.get_status()
    return status.is_charging


async def location(vehicle, _args):
    """Get the location of the vehicle."""
    return await vehicle.get_location()


async def lock(vehicle, _args):
    """Lock the vehicle."""
    return await vehicle.remote_services.lock()


async def locked(vehicle, _args):
    """Check if the doors are locked."""
    status = await vehicle.get_status()
    return status.door_is_locked


async def max_range(vehicle, _args):
    """Get the range extrapolated to a full battery."""
    status = await vehicle.get_status()
    return status.max_range


async def odometer(vehicle, _args):
    """Get the odometer reading."""
    return await vehicle.get_odometer()


async def range_left(vehicle, _args):
    """Get the remaining electric range."""
    status = await vehicle.get_status()
    return status.range_left


async def start(vehicle, _args):
    """Start climatisation."""
    return await vehicle.remote_services.start()


async def status(vehicle, _args):
    """Get current status from vehicle."""
    result = await vehicle.get_status()
    return dataclasses.asdict(result) | {"max_range": result.max_range}


async def stop(vehicle, _args):
    """Stop climatisation."""
    return await vehicle.remote_services.stop()


async def target_soc(vehicle, _args):
    """Get the target state of charge per plug type."""
    result = await vehicle.get_status()
    return {"AC": result.target_soc_ac, "DC": result.target_soc_dc}


async def unlock(vehicle, _args):
    """Unlock the vehicle."""
    return await vehicle.remote_services.unlock()


async def main(args):
    """Get arguments from parser and run command."""
    if args.debug:
        logging.root.setLevel(logging.DEBUG)

    email = args.email or input("Please enter Bluelink email: ")
    password = args.password or getpass()

    config = Config(email, password, pin=args.pin, brand=args.brand, region=args.region)
    try:
        account = BluelinkAccount(config, ClientOptions(timeout=args.timeout))
    except BluelinkExceptionError as e:
        sys.exit(e.message)

    try:
        await account.authenticate()
        if args.command == "list":
            vehicles = await account.get_vehicles()
            response = [vehicle.data for vehicle in vehicles]
        elif args.command == "token":
            auth = account.connection.auth
            response = {"access_token": auth.access_token, "device_id": auth.device_id}
        else:
            if args.vin is not None:
                vehicles = [await account.get_vehicle(args.vin)]
            else:
                vehicles = await account.get_vehicles()
            response = {}
            for vehicle in vehicles:
                if vehicle is not None:
                    response[vehicle.vin] = await globals()[args.func](vehicle, args)
    except BluelinkExceptionError as e:
        sys.exit(e.message)
    else:
        printc(response)
    finally:
        await account.close()


def add_arg_vin(parser):
    """Add vin to the argument parser."""
    group = parser.add_mutually_exclusive_group(
        required=True,
    )
    group.add_argument("-v", "--vin", dest="vin", default=None)
    group.add_argument("-a", "--all", dest="all", action="store_true")


def get_parser():
    """Build the argument parser, with defaults from `.bluelink.cfg`."""
    config = configparser.ConfigParser()
    config["bluelink"] = {
        "email": "",
        "password": "",
        "pin": "",
        "brand": "hyundai",
        "region": "eu",
        "timeout": str(DEFAULT_TIMEOUT),
    }
    config.read([".bluelink.cfg", Path("~/.bluelink.cfg").expanduser()])
    parser = argparse.ArgumentParser(description="Bluelink CLI")
    subparsers = parser.add_subparsers(help="command help", dest="command")

    parser.add_argument("-d", "--debug", dest="debug", action="store_true")
    parser.add_argument(
        "-e",
        "--email",
        dest="email",
        default=config.get("bluelink", "email"),
    )
    parser.add_argument(
        "-p",
        "--password",
        dest="password",
        default=config.get("bluelink", "password"),
    )
    parser.add_argument(
        "-n",
        "--pin",
        dest="pin",
        default=config.get("bluelink", "pin"),
    )
    parser.add_argument(
        "-b",
        "--brand",
        dest="brand",
        default=config.get("bluelink", "brand"),
    )
    parser.add_argument(
        "-r",
        "--region",
        dest="region",
        default=config.get("bluelink", "region"),
    )
    parser.add_argument(
        "-t",
        "--timeout",
        dest="timeout",
        type=float,
        default=config.getfloat("bluelink", "timeout"),
    )

    subparsers.add_parser("list")
    subparsers.add_parser("token")

    for vcmd, vdesc in vehicle_commands.items():
        parser_command = subparsers.add_parser(vcmd, help=vdesc)
        parser_command.set_defaults(func=command_functions.get(vcmd, vcmd))
        add_arg_vin(parser_command)

    return parser


def cli():
    """Get configuration parameters and command line arguments and run main loop."""
    parser = get_parser()
    args = parser.parse_args()

    if args.command:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        loop.run_until_complete(main(args))
    else:
        parser.print_help(sys.stderr)
