"""
Resolvers are the pipeline stages turning live system state into a serial:
root mount -> disk classification -> physical device name -> udev serial.
Each stage receives host_root (and the executor where it runs commands);
the first failure propagates unchanged.
"""

import logging
from pathlib import Path
from typing import Optional

from ..executor import Executor, make_executor
from ..schema import Resolution

from .mounts import resolve_root_mount, trace_root_mount
from .disk import classify
from .locator import locate
from .serial import find_device, lookup_serial, serial_of

logger = logging.getLogger(__name__)

__all__ = [
    "classify",
    "get_device_serial",
    "locate",
    "lookup_serial",
    "resolve",
    "resolve_root_mount",
]


def resolve(
    host_root: Path = Path("/"),
    executor: Optional[Executor] = None,
) -> Resolution:
    """Run every stage and return the full trace."""
    host_root = Path(host_root)
    if executor is None:
        executor = make_executor(str(host_root))

    root_mount, overlay_mount = trace_root_mount(host_root)
    disk = classify(root_mount, host_root)
    device_name = locate(root_mount, disk, host_root)
    device = find_device(executor, device_name)
    serial, source = serial_of(device)
    logger.debug("serial of %s from %s: %s", device_name, source.value, serial)

    return Resolution(
        root_mount=root_mount,
        overlay_mount=overlay_mount,
        disk=disk,
        device_name=device_name,
        device=device,
        serial=serial,
        serial_source=source,
    )


def get_device_serial(
    host_root: Path = Path("/"),
    executor: Optional[Executor] = None,
) -> str:
    """Hardware serial of the physical device backing "/"."""
    return resolve(host_root, executor).serial
