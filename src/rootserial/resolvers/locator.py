"""Physical device locator: block device name to ask udev about."""

import logging
from pathlib import Path
from typing import Union

from ..errors import (
    BlockDeviceNotFound,
    DeviceBlockListReadFailure,
    LvmDeviceSlaveNotFound,
    LvmDeviceSlavesNotFound,
    LvmMultipleSlavesUnsupported,
)
from ..schema import LvmDisk, MountEntry, RegularDisk
from ..sysfs import list_block_devices, read_dir

logger = logging.getLogger(__name__)


def _locate_regular(mount: MountEntry, host_root: Path) -> str:
    try:
        devices = list_block_devices(host_root)
    except (OSError, ValueError) as e:
        raise DeviceBlockListReadFailure(str(e), cause=e) from e
    dev = devices.find_by_id(mount.device_id)
    if dev is None:
        raise BlockDeviceNotFound(f"no block device with id {mount.device_id}")
    return dev.name


def _locate_lvm(disk: LvmDisk) -> str:
    try:
        slaves = read_dir(Path(disk.slaves_dir))
    except OSError as e:
        raise LvmDeviceSlavesNotFound(disk.slaves_dir, cause=e) from e
    if not slaves:
        raise LvmDeviceSlaveNotFound(f"{disk.slaves_dir} is empty")
    if len(slaves) > 1:
        raise LvmMultipleSlavesUnsupported(f"{disk.name}: {', '.join(slaves)}")
    logger.debug("LVM volume %s sits on %s", disk.name, slaves[0])
    return slaves[0]


def locate(mount: MountEntry, disk: Union[RegularDisk, LvmDisk], host_root: Path = Path("/")) -> str:
    if isinstance(disk, LvmDisk):
        return _locate_lvm(disk)
    return _locate_regular(mount, Path(host_root))
