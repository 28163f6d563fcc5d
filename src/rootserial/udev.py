"""
udev device database, read through ``udevadm info --export-db``.

The export is a sequence of blank-line separated records:

    P: /devices/pci0000:00/0000:00:17.0/ata1/host0/target0:0:0/0:0:0:0/block/sda
    N: sda
    E: SUBSYSTEM=block
    E: ID_SERIAL=WDC_WD10EZEX-08WN4A0_WD-WCC6Y3KZ1234
    E: ID_SERIAL_SHORT=WD-WCC6Y3KZ1234
"""

import logging
from typing import List, Optional

from .executor import Executor
from .schema import HardwareDevice

logger = logging.getLogger(__name__)

EXPORT_DB_CMD = ["udevadm", "info", "--export-db"]


def _record_to_device(lines: List[str]) -> Optional[HardwareDevice]:
    devpath = ""
    devname = None
    subsystem = ""
    props = {}
    for line in lines:
        tag, sep, value = line.partition(": ")
        if not sep:
            continue
        if tag == "P":
            devpath = value.strip()
        elif tag == "N":
            devname = value.strip()
        elif tag == "U":
            subsystem = value.strip()
        elif tag == "E":
            key, eq, val = value.partition("=")
            if eq:
                props[key] = val
    if not devpath:
        return None
    subsystem = subsystem or props.get("SUBSYSTEM", "")
    return HardwareDevice(
        devpath=devpath,
        sysname=devpath.rstrip("/").rsplit("/", 1)[-1],
        subsystem=subsystem,
        devname=props.get("DEVNAME") or (f"/dev/{devname}" if devname else None),
        properties=props,
    )


def parse_export_db(text: str, subsystem: Optional[str] = None) -> List[HardwareDevice]:
    """Parse udevadm --export-db output, keeping only devices of subsystem when given."""
    devices = []
    record: List[str] = []
    for line in text.splitlines() + [""]:
        if line.strip():
            record.append(line)
            continue
        if record:
            dev = _record_to_device(record)
            if dev is not None and (subsystem is None or dev.subsystem == subsystem):
                devices.append(dev)
            record = []
    return devices


def enumerate_devices(executor: Executor, subsystem: str = "block") -> List[HardwareDevice]:
    """
    All udev devices in subsystem. Raises RuntimeError when udevadm fails
    or returns nothing.
    """
    r = executor(EXPORT_DB_CMD)
    if r.returncode != 0:
        raise RuntimeError(
            f"{' '.join(EXPORT_DB_CMD)} exited {r.returncode}: {r.stderr.strip() or 'no output'}"
        )
    if not r.stdout.strip():
        raise RuntimeError(f"{' '.join(EXPORT_DB_CMD)} returned an empty database")
    devices = parse_export_db(r.stdout, subsystem=subsystem)
    logger.debug("udev reports %d %s devices", len(devices), subsystem)
    return devices
