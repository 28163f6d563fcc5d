"""Disk classifier: plain block device or LVM logical volume."""

from pathlib import Path
from typing import Union

from ..errors import RootDiskNotFound
from ..schema import LvmDisk, MountEntry, RegularDisk
from ..sysfs import slaves_dir


def classify(mount: MountEntry, host_root: Path = Path("/")) -> Union[RegularDisk, LvmDisk]:
    disk = mount.disk
    if disk is None:
        raise RootDiskNotFound(f"{mount.source} ({mount.fs_type}) on {mount.mount_point} is not on a block device")
    if disk.is_lvm:
        return LvmDisk(name=disk.name, slaves_dir=str(slaves_dir(host_root, disk.name)))
    return RegularDisk(name=disk.name)
