"""Serial lookup: hardware serial of a block device from the udev database."""

import logging
from typing import Tuple

from ..errors import SerialNotFound, UdevDeviceNotFound, UdevDeviceScanFailure
from ..executor import Executor
from ..schema import HardwareDevice, SerialSource
from ..udev import enumerate_devices

logger = logging.getLogger(__name__)

# ID_SERIAL often carries vendor/model prefixes; the short form is the bare serial.
SERIAL_KEYS = (SerialSource.ID_SERIAL_SHORT, SerialSource.ID_SERIAL)


def find_device(executor: Executor, device_name: str) -> HardwareDevice:
    try:
        devices = enumerate_devices(executor, subsystem="block")
    except RuntimeError as e:
        raise UdevDeviceScanFailure(str(e), cause=e) from e
    for dev in devices:
        if dev.sysname == device_name:
            return dev
    raise UdevDeviceNotFound(device_name)


def serial_of(device: HardwareDevice) -> Tuple[str, SerialSource]:
    for key in SERIAL_KEYS:
        value = (device.get_property(key.value) or "").strip()
        if value:
            return value, key
        logger.debug("%s has no %s", device.sysname, key.value)
    raise SerialNotFound(device.sysname)


def lookup_serial(device_name: str, executor: Executor) -> str:
    return serial_of(find_device(executor, device_name))[0]
