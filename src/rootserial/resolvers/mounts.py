"""Root mount resolver: finds the mount for "/", unwrapping one level of overlay."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import MountTableUnreadable, OverlayLowerDirMissing, RootMountNotFound
from ..options import option_value
from ..procfs import read_live_mounts, read_mounts
from ..schema import LiveMount, MountEntry

logger = logging.getLogger(__name__)

ROOT = "/"
OVERLAY_FS_TYPE = "overlay"
# overlayroot (cloud-initramfs-tools) mounts "/" with this source name
OVERLAYROOT_SOURCE = "overlayroot"


def is_overlay(mount: MountEntry) -> bool:
    return mount.fs_type == OVERLAY_FS_TYPE or mount.source == OVERLAYROOT_SOURCE


def find_mount(mounts: List[MountEntry], mount_point: str) -> Optional[MountEntry]:
    """
    Last entry mounted at mount_point, not the first: a later mount on the same
    point shadows the earlier ones, so the last entry is the one in effect.
    """
    found = None
    for m in mounts:
        if m.mount_point == mount_point:
            found = m
    return found


def overlay_lower_dir(live_mounts: List[LiveMount]) -> str:
    """lowerdir= of the live "/" mount; the last "/" entry is the one in effect."""
    root = None
    for m in live_mounts:
        if m.dest == ROOT:
            root = m
    if root is None:
        raise RootMountNotFound("no \"/\" entry in live mount table")
    lower = option_value(root.options, "lowerdir")
    if lower is None:
        raise OverlayLowerDirMissing(f"options: {','.join(root.options) or '(none)'}")
    return lower


def _read_mounts(host_root: Path) -> List[MountEntry]:
    try:
        return read_mounts(host_root)
    except (OSError, ValueError) as e:
        raise MountTableUnreadable(str(e), cause=e) from e


def _read_live_mounts(host_root: Path) -> List[LiveMount]:
    try:
        return list(read_live_mounts(host_root))
    except (OSError, ValueError) as e:
        raise MountTableUnreadable(str(e), cause=e) from e


def trace_root_mount(host_root: Path = Path("/")) -> Tuple[MountEntry, Optional[MountEntry]]:
    """
    Resolved root mount, plus the overlay mount it was reached through (or None).
    The overlay is followed exactly once; a lower dir that is itself an overlay
    is rejected.
    """
    host_root = Path(host_root)
    mounts = _read_mounts(host_root)
    root = find_mount(mounts, ROOT)
    if root is None:
        raise RootMountNotFound("no mount at \"/\"")
    if not is_overlay(root):
        logger.debug("root mount: %s (%s) on %s", root.source, root.fs_type, root.device_id)
        return root, None

    logger.debug("root is an overlay (%s, %s); looking up lowerdir", root.source, root.fs_type)
    lower_dir = overlay_lower_dir(_read_live_mounts(host_root))
    lower = find_mount(mounts, lower_dir)
    if lower is None:
        raise RootMountNotFound(f"no mount at overlay lowerdir {lower_dir}")
    if is_overlay(lower):
        raise RootMountNotFound(f"overlay lowerdir {lower_dir} is itself an overlay")
    logger.debug("overlay lowerdir %s: %s (%s) on %s", lower_dir, lower.source, lower.fs_type, lower.device_id)
    return lower, root


def resolve_root_mount(host_root: Path = Path("/")) -> MountEntry:
    return trace_root_mount(host_root)[0]
