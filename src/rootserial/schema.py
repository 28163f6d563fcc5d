"""
Resolution schema.

Strongly typed snapshots passed between the pipeline stages. Every model is
built fresh from live system state on each run and never mutated afterwards.
"""

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# --- Kernel identifiers ---


class DeviceId(BaseModel):
    """Kernel device number, written as ``major:minor``."""

    major: int
    minor: int

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, text: str) -> "DeviceId":
        major, sep, minor = text.strip().partition(":")
        if not sep:
            raise ValueError(f"not a major:minor device id: {text!r}")
        return cls(major=int(major), minor=int(minor))

    def __str__(self) -> str:
        return f"{self.major}:{self.minor}"


# --- Mount tables ---


class DiskDescriptor(BaseModel):
    """Disk associated with a mount, as the kernel names it under /sys/block."""

    name: str
    is_lvm: bool = False

    model_config = {"frozen": True}


class MountEntry(BaseModel):
    """One line of /proc/self/mountinfo."""

    mount_id: int
    mount_point: str
    device_id: DeviceId
    source: str
    fs_type: str
    mount_options: List[str] = Field(default_factory=list)
    disk: Optional[DiskDescriptor] = None

    model_config = {"frozen": True}


class LiveMount(BaseModel):
    """One line of /proc/mounts; only used to read overlay options."""

    source: str
    dest: str
    fs_type: str
    options: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}


# --- Classified disks ---


class RegularDisk(BaseModel):
    kind: Literal["regular"] = "regular"
    name: str

    model_config = {"frozen": True}


class LvmDisk(BaseModel):
    """LVM logical volume; its physical members are listed in slaves_dir."""

    kind: Literal["lvm"] = "lvm"
    name: str
    slaves_dir: str

    model_config = {"frozen": True}


ClassifiedDisk = Annotated[Union[RegularDisk, LvmDisk], Field(discriminator="kind")]


# --- Block devices ---


class BlockDevice(BaseModel):
    device_id: DeviceId
    name: str

    model_config = {"frozen": True}


class BlockDeviceList(BaseModel):
    """All block devices known to sysfs, queryable by device id."""

    devices: List[BlockDevice] = Field(default_factory=list)

    def find_by_id(self, device_id: DeviceId) -> Optional[BlockDevice]:
        for dev in self.devices:
            if dev.device_id == device_id:
                return dev
        return None


# --- udev ---


class SerialSource(str, Enum):
    ID_SERIAL_SHORT = "ID_SERIAL_SHORT"
    ID_SERIAL = "ID_SERIAL"


class HardwareDevice(BaseModel):
    """A device record from the udev database."""

    devpath: str
    sysname: str
    subsystem: str = ""
    devname: Optional[str] = None
    properties: Dict[str, str] = Field(default_factory=dict)

    def get_property(self, key: str) -> Optional[str]:
        return self.properties.get(key)


# --- Root result ---


class Resolution(BaseModel):
    """
    Full trace of one resolution run. Serialized by ``--json``.
    overlay_mount is set only when "/" was an overlay and got unwrapped.
    """

    root_mount: MountEntry
    overlay_mount: Optional[MountEntry] = None
    disk: ClassifiedDisk
    device_name: str
    device: HardwareDevice
    serial: str
    serial_source: SerialSource

    model_config = {"extra": "forbid"}
