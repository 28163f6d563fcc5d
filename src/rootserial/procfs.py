"""
Mount tables from /proc under host_root.

Two sources are read:
  - proc/self/mountinfo: full table with device numbers (root mount lookup)
  - proc/mounts: live table with combined option strings (overlay lowerdir lookup)
Both are decoded the same way so they agree on paths.
"""

import logging
from pathlib import Path
from typing import Iterator, List

from .options import split_option_string, unescape
from .schema import DeviceId, LiveMount, MountEntry
from .sysfs import disk_for_device

logger = logging.getLogger(__name__)

MOUNTINFO = "proc/self/mountinfo"
PROC_MOUNTS = "proc/mounts"
# non-UTF-8 paths decode identically in both tables
UNDECODABLE = "backslashreplace"


def _options(field: str) -> List[str]:
    """Split first: an escaped comma (\\054) belongs to the option value."""
    return [unescape(o) for o in split_option_string(field)]


def parse_mountinfo_line(line: str) -> MountEntry:
    """
    Parse one mountinfo line (without disk lookup):
      36 35 98:0 /mnt1 /mnt2 rw,noatime master:1 - ext3 /dev/root rw,errors=continue
    Raises ValueError on malformed input.
    """
    fields = line.split()
    try:
        sep = fields.index("-", 6)
    except ValueError:
        raise ValueError(f"mountinfo line has no separator: {line!r}")
    if len(fields) < sep + 3:
        raise ValueError(f"mountinfo line is truncated: {line!r}")
    mount_options = _options(fields[5])
    super_options = _options(fields[sep + 3]) if len(fields) > sep + 3 else []
    return MountEntry(
        mount_id=int(fields[0]),
        device_id=DeviceId.parse(fields[2]),
        mount_point=unescape(fields[4]),
        fs_type=fields[sep + 1],
        source=unescape(fields[sep + 2]),
        mount_options=mount_options + [o for o in super_options if o not in mount_options],
    )


def read_mounts(host_root: Path) -> List[MountEntry]:
    """
    All mounts with their disk descriptor attached when one exists.
    Raises OSError if the table cannot be read, ValueError if a line is malformed.
    """
    host_root = Path(host_root)
    text = (host_root / MOUNTINFO).read_text(encoding="utf-8", errors=UNDECODABLE)
    mounts = []
    for line in text.splitlines():
        if not line.strip():
            continue
        entry = parse_mountinfo_line(line)
        disk = disk_for_device(host_root, entry.device_id)
        mounts.append(entry.model_copy(update={"disk": disk}))
    logger.debug("read %d mounts from %s", len(mounts), MOUNTINFO)
    return mounts


def read_live_mounts(host_root: Path) -> Iterator[LiveMount]:
    """Lazily yield entries of proc/mounts. Lines that do not parse are skipped."""
    path = Path(host_root) / PROC_MOUNTS
    with open(path, encoding="utf-8", errors=UNDECODABLE) as f:
        for line in f:
            parts = line.split()
            if len(parts) < 4:
                logger.debug("skipping malformed %s line: %r", PROC_MOUNTS, line)
                continue
            yield LiveMount(
                source=unescape(parts[0]),
                dest=unescape(parts[1]),
                fs_type=parts[2],
                options=_options(parts[3]),
            )
