"""in-memory device registry"""

import logging
from typing import Callable, List, Optional

from config import CAPACITY_MESSAGE, MAX_DEVICES
from devices import Device
from loader import load_devices, read_device_file
from utils import format_device_list, print_devices

logger = logging.getLogger(__name__)


class RegistryFullError(RuntimeError):
    pass


class DeviceRegistry:
    """Ordered, capacity bounded store of devices.

    Ids are not required to be unique. remove() drops every match,
    edit() and get() act on the first one.
    """

    def __init__(self, capacity=MAX_DEVICES, devices=None):
        self._capacity = capacity
        self._devices: List[Device] = []
        for d in devices or []:
            self.add(d)

    @classmethod
    def from_file(cls, path, capacity=MAX_DEVICES):
        """Build a registry from a device file, truncated at capacity"""
        lines = read_device_file(path)
        registry = cls(capacity=capacity)
        registry._devices.extend(load_devices(lines, capacity))
        logger.info("registry loaded from %s with %d devices", path, len(registry))
        return registry

    @property
    def capacity(self):
        return self._capacity

    @property
    def is_full(self):
        return len(self._devices) >= self._capacity

    @property
    def devices(self):
        return tuple(self._devices)

    def __len__(self):
        return len(self._devices)

    def __iter__(self):
        # snapshot so callers can add/remove while looping
        return iter(self.devices)

    def add(self, device: Device):
        if self.is_full:
            raise RegistryFullError(CAPACITY_MESSAGE)
        self._devices.append(device)
        logger.debug("added %s", device.device_id)

    def remove(self, device_id: str) -> int:
        before = len(self._devices)
        self._devices = [d for d in self._devices if d.device_id != device_id]
        removed = before - len(self._devices)
        if removed:
            logger.debug("removed %d device(s) with id %s", removed, device_id)
        return removed

    def get(self, device_id: str) -> Optional[Device]:
        return next((d for d in self._devices if d.device_id == device_id), None)

    def edit(self, device_id: str, mutation: Callable[[Device], None]) -> bool:
        device = self.get(device_id)
        if device is None:
            return False
        mutation(device)
        return True

    def describe_all(self) -> List[str]:
        return format_device_list(self._devices)

    def print_all(self, title=None):
        print_devices(self.devices, title)
