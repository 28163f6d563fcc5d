"""Block device topology from /sys under host_root: device numbers, disks, LVM slaves."""

import logging
from pathlib import Path
from typing import List, Optional

from .schema import BlockDevice, BlockDeviceList, DeviceId, DiskDescriptor

logger = logging.getLogger(__name__)

LVM_UUID_PREFIX = "LVM-"


def read_dir(path: Path) -> List[str]:
    """Sorted entry names of path. Raises OSError when it cannot be listed."""
    return sorted(p.name for p in Path(path).iterdir())


def slaves_dir(host_root: Path, disk_name: str) -> Path:
    return Path(host_root) / "sys/block" / disk_name / "slaves"


def is_lvm(host_root: Path, disk_name: str) -> bool:
    """Device-mapper nodes created by LVM carry a dm uuid starting with LVM-."""
    uuid_file = Path(host_root) / "sys/block" / disk_name / "dm/uuid"
    try:
        return uuid_file.read_text().strip().startswith(LVM_UUID_PREFIX)
    except OSError:
        return False


def disk_for_device(host_root: Path, device_id: DeviceId) -> Optional[DiskDescriptor]:
    """
    Disk holding device_id, or None if the kernel has no block device with that number
    (tmpfs, proc, network filesystems...). A partition resolves to its parent disk.
    """
    link = Path(host_root) / "sys/dev/block" / str(device_id)
    if not link.exists():
        return None
    node = link.resolve()
    if (node / "partition").exists():
        node = node.parent
    disk = DiskDescriptor(name=node.name, is_lvm=is_lvm(host_root, node.name))
    logger.debug("device %s belongs to disk %s (lvm=%s)", device_id, disk.name, disk.is_lvm)
    return disk


def list_block_devices(host_root: Path) -> BlockDeviceList:
    """
    Every block device under sys/class/block with its device number.
    Raises OSError or ValueError if the class directory or a dev file cannot be read.
    """
    class_dir = Path(host_root) / "sys/class/block"
    devices = []
    for name in read_dir(class_dir):
        dev_file = class_dir / name / "dev"
        devices.append(BlockDevice(device_id=DeviceId.parse(dev_file.read_text()), name=name))
    logger.debug("found %d block devices", len(devices))
    return BlockDeviceList(devices=devices)
