"""device file parsing

One device per line, comma separated, no header:

    SW-1,Apple Watch SE,true,27%
    P-1,LinuxPC,false,Linux Mint
    ED-1,Pi3,192.168.1.44,MD Ltd.Wifi-1

The id prefix picks the device type. Rows that don't parse are dropped.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from config import DEVICE_PREFIXES, FIELD_SEPARATOR, MAX_DEVICES
from devices import Device, DeviceType, create_device

logger = logging.getLogger(__name__)


def _parse_bool(raw: str) -> bool:
    v = raw.strip().lower()
    if v == "true":
        return True
    if v == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _smartwatch_fields(parts):
    return {
        "is_turned_on": _parse_bool(parts[2]),
        "battery_level": int(parts[3].rstrip("%")),
    }


def _computer_fields(parts):
    return {
        "is_turned_on": _parse_bool(parts[2]),
        "operating_system": parts[3] if len(parts) > 3 else None,
    }


def _embedded_fields(parts):
    return {
        "ip_address": parts[2],
        "network_name": parts[3],
    }


ROW_LAYOUTS = {
    "SW": (DeviceType.SMARTWATCH, _smartwatch_fields),
    "P": (DeviceType.COMPUTER, _computer_fields),
    "ED": (DeviceType.EMBEDDED, _embedded_fields),
}


def parse_line(line: str) -> Optional[Device]:
    """One row -> device, or None if the row is unknown or broken"""
    parts = line.split(FIELD_SEPARATOR)
    device_id = parts[0]

    prefix = next((p for p in DEVICE_PREFIXES if device_id.startswith(p)), None)
    if prefix is None:
        logger.debug("skipping row with unknown prefix: %r", line)
        return None

    device_type, fields_for = ROW_LAYOUTS[prefix]
    try:
        return create_device(device_type, device_id, parts[1], **fields_for(parts))
    except (IndexError, ValueError) as e:
        # ValueError covers the battery and ip validation errors too
        logger.debug("skipping bad %s row %r: %s", device_type.value, line, e)
        return None


def read_device_file(path) -> List[str]:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Device file not found: {path}")
    return path.read_text(encoding="utf-8").splitlines()


def load_devices(lines: Iterable[str], capacity: int = MAX_DEVICES) -> List[Device]:
    """Parse every row, keep valid devices in file order up to capacity.

    Rows past the limit are still parsed so broken ones get logged,
    they just aren't kept. Overflow is not an error here.
    """
    devices = []
    skipped = 0
    overflow = 0

    for line in lines:
        device = parse_line(line)
        if device is None:
            skipped += 1
        elif len(devices) < capacity:
            devices.append(device)
        else:
            overflow += 1

    logger.info(
        "loaded %d devices (%d rows skipped, %d over capacity)",
        len(devices), skipped, overflow,
    )
    return devices
