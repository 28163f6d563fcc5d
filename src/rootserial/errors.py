"""
Failure kinds for root device serial resolution.

Each pipeline stage raises exactly one kind per failure condition. Nothing
retries; the first failure ends the run. When a failure is caused by an
underlying OS or parse error, that error is chained (``raise ... from``) and
kept on ``cause``.
"""

from typing import Optional


class SerialResolutionError(Exception):
    """Base class for every resolution failure."""

    code = "serial_resolution_error"
    message = "Failed to resolve root device serial"

    def __init__(self, detail: Optional[str] = None, cause: Optional[BaseException] = None):
        self.detail = detail
        self.cause = cause
        super().__init__(self.describe())

    def describe(self, with_cause: bool = False) -> str:
        text = self.message
        if self.detail:
            text = f"{text}: {self.detail}"
        if with_cause and self.cause is not None:
            text = f"{text} ({self.cause})"
        return text


# --- Mount table ---


class MountTableUnreadable(SerialResolutionError):
    code = "mount_table_unreadable"
    message = "Failed to read mount points"


class RootMountNotFound(SerialResolutionError):
    code = "root_mount_not_found"
    message = "Failed to get root file system mount"


class OverlayLowerDirMissing(SerialResolutionError):
    code = "overlay_lower_dir_missing"
    message = "Overlay root lowerdir not found"


# --- Disk / block devices ---


class RootDiskNotFound(SerialResolutionError):
    code = "root_disk_not_found"
    message = "Failed to get root device disk"


class DeviceBlockListReadFailure(SerialResolutionError):
    code = "device_block_list_read_failure"
    message = "Failed to read device block list"


class BlockDeviceNotFound(SerialResolutionError):
    code = "block_device_not_found"
    message = "Failed to find block device"


class LvmDeviceSlavesNotFound(SerialResolutionError):
    code = "lvm_device_slaves_not_found"
    message = "Slave devices not found for LVM root"


class LvmDeviceSlaveNotFound(SerialResolutionError):
    code = "lvm_device_slave_not_found"
    message = "Slave device not found for LVM root"


class LvmMultipleSlavesUnsupported(SerialResolutionError):
    code = "lvm_multiple_slaves_unsupported"
    message = "LVM root spans several physical devices"


# --- udev ---


class UdevDeviceScanFailure(SerialResolutionError):
    code = "udev_device_scan_failure"
    message = "Failed to scan devices"


class UdevDeviceNotFound(SerialResolutionError):
    code = "udev_device_not_found"
    message = "Failed to find udev device"


class SerialNotFound(SerialResolutionError):
    code = "serial_not_found"
    message = "Serial not found"
