#!/usr/bin/env python3
"""device registry main"""

import argparse
import logging
import sys

from pydantic import ValidationError

from config import DEFAULT_DEVICE_FILE, MAX_DEVICES, RegistrySettings
from devices import Smartwatch
from registry import DeviceRegistry


def main(settings=None):
    settings = settings or RegistrySettings()

    try:
        registry = DeviceRegistry.from_file(settings.device_file, capacity=settings.capacity)
        print("Devices loaded successfully!")
        registry.print_all()

        registry.add(Smartwatch("SW-2", "Galaxy Watch", battery_level=50))
        print("New device added!")
        registry.print_all()
    except Exception as e:
        print(f"Error: {e}")
        return 1

    return 0


def run():
    parser = argparse.ArgumentParser(description="Device registry")
    parser.add_argument("-f", "--file", default=str(DEFAULT_DEVICE_FILE), help="device file to load")
    parser.add_argument("-c", "--capacity", type=int, default=MAX_DEVICES, help="max devices held")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = RegistrySettings(device_file=args.file, capacity=args.capacity)
    except ValidationError as e:
        parser.error(str(e))

    sys.exit(main(settings))


if __name__ == "__main__":
    run()
