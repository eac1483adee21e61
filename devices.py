"""devices"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging
import re

from config import (
    BATTERY,
    CORPORATE_NETWORK_MARKER,
    IP_ADDRESS_PATTERN,
    LOW_BATTERY_MESSAGE,
    format_battery,
    format_os,
)

logger = logging.getLogger(__name__)

_IP_RE = re.compile(IP_ADDRESS_PATTERN)


class DeviceType(Enum):
    GENERIC = "generic"
    SMARTWATCH = "smartwatch"
    COMPUTER = "computer"
    EMBEDDED = "embedded"


# ============================================================================
# Errors
# ============================================================================

class DeviceError(Exception):
    """Base class for device rule violations"""


class EmptyBatteryError(DeviceError):
    pass


class EmptySystemError(DeviceError):
    pass


class NetworkConnectionError(DeviceError):
    pass


class BatteryLevelError(DeviceError, ValueError):
    pass


class InvalidIpAddressError(DeviceError, ValueError):
    pass


# ============================================================================
# Capabilities
# ============================================================================

class PowerNotifier(ABC):
    """Anything that can warn about its own power running out"""

    @abstractmethod
    def notify_low_battery(self):
        pass


# ============================================================================
# Devices
# ============================================================================

@dataclass(eq=False)
class Device(ABC):
    device_id: str
    name: str
    is_turned_on: bool = False
    device_type: DeviceType = field(default=DeviceType.GENERIC, init=False)

    @abstractmethod
    def turn_on(self):
        """Power the device on, or raise a DeviceError if it can't be"""
        pass

    @abstractmethod
    def describe(self) -> str:
        pass

    def __str__(self):
        return self.describe()


class Smartwatch(Device, PowerNotifier):
    def __init__(self, device_id, name, *, battery_level=None, is_turned_on=False):
        self.device_id = device_id
        self.name = name
        self.is_turned_on = is_turned_on
        self.device_type = DeviceType.SMARTWATCH
        # a fresh watch starts empty but only assignments warn
        self._battery_level = BATTERY["min"]
        if battery_level is not None:
            self.battery_level = battery_level

    @property
    def battery_level(self):
        return self._battery_level

    @battery_level.setter
    def battery_level(self, value):
        # bool is an int subclass but never a battery level
        if isinstance(value, bool) or not isinstance(value, int):
            raise BatteryLevelError(f"Battery level must be a whole number, got {value!r}")
        if value < BATTERY["min"] or value > BATTERY["max"]:
            raise BatteryLevelError(
                f"Battery level must be between {BATTERY['min']} and {BATTERY['max']}, got {value}"
            )
        self._battery_level = value
        if value < BATTERY["low_threshold"]:
            self.notify_low_battery()

    def notify_low_battery(self):
        logger.warning("%s (%s) battery low at %d%%", self.name, self.device_id, self._battery_level)
        print(LOW_BATTERY_MESSAGE)

    def turn_on(self):
        if self._battery_level < BATTERY["min_turn_on"]:
            raise EmptyBatteryError(
                f"{self.name} battery too low to turn on ({format_battery(self._battery_level)})"
            )
        self.battery_level -= BATTERY["turn_on_cost"]
        self.is_turned_on = True

    def describe(self):
        return (
            f"Smartwatch [ID: {self.device_id}, Name: {self.name}, "
            f"Turned On: {self.is_turned_on}, Battery: {format_battery(self._battery_level)}]"
        )


@dataclass(eq=False)
class PersonalComputer(Device):
    operating_system: Optional[str] = None

    def __post_init__(self):
        self.device_type = DeviceType.COMPUTER

    def turn_on(self):
        if not self.operating_system:
            raise EmptySystemError(f"{self.name} has no operating system installed")
        self.is_turned_on = True

    def describe(self):
        return (
            f"Personal Computer [ID: {self.device_id}, Name: {self.name}, "
            f"Turned On: {self.is_turned_on}, OS: {format_os(self.operating_system)}]"
        )


# embedded boxes only talk to the corporate network
class EmbeddedDevice(Device):
    def __init__(self, device_id, name, ip_address, network_name, is_turned_on=False):
        self.device_id = device_id
        self.name = name
        self.is_turned_on = is_turned_on
        self.device_type = DeviceType.EMBEDDED
        self.ip_address = ip_address
        self.network_name = network_name

    @property
    def ip_address(self):
        return self._ip_address

    @ip_address.setter
    def ip_address(self, value):
        if not isinstance(value, str) or not _IP_RE.fullmatch(value):
            raise InvalidIpAddressError(f"Invalid IP address: {value!r}")
        self._ip_address = value

    def connect(self):
        if CORPORATE_NETWORK_MARKER not in (self.network_name or ""):
            raise NetworkConnectionError(
                f"{self.name} cannot connect to network {self.network_name!r}"
            )
        logger.debug("%s connected to %s", self.device_id, self.network_name)

    def turn_on(self):
        self.connect()
        self.is_turned_on = True

    def describe(self):
        return (
            f"Embedded Device [ID: {self.device_id}, Name: {self.name}, "
            f"Turned On: {self.is_turned_on}, IP: {self._ip_address}, Network: {self.network_name}]"
        )


# ============================================================================
# Device Factory - Create devices by type
# ============================================================================

def create_device(device_type, device_id: str, name: str, **kwargs):
    """Factory function to create devices by type"""
    device_type = DeviceType(device_type)
    is_turned_on = kwargs.get("is_turned_on", False)

    if device_type is DeviceType.SMARTWATCH:
        return Smartwatch(
            device_id, name,
            battery_level=kwargs.get("battery_level"),
            is_turned_on=is_turned_on,
        )

    elif device_type is DeviceType.COMPUTER:
        return PersonalComputer(
            device_id, name,
            is_turned_on=is_turned_on,
            operating_system=kwargs.get("operating_system"),
        )

    elif device_type is DeviceType.EMBEDDED:
        return EmbeddedDevice(
            device_id, name,
            ip_address=kwargs["ip_address"],
            network_name=kwargs["network_name"],
            is_turned_on=is_turned_on,
        )

    else:
        raise ValueError(f"Unknown device type: {device_type.value}")
