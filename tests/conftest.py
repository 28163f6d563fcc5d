"""
Shared fixtures: a fake host tree (proc/ and sys/ under tmp_path) and an
executor returning canned udevadm output. No real host access.
"""

from pathlib import Path
from typing import List, Optional

import pytest

from rootserial.executor import RunResult

FIXTURES = Path(__file__).parent / "fixtures"

EXT4_ROOT = "22 1 8:1 / / rw,relatime shared:1 - ext4 /dev/sda1 rw,errors=remount-ro"
PROC = "25 22 0:22 / /proc rw,nosuid,nodev,noexec,relatime shared:12 - proc proc rw"
TMPFS = "26 22 0:23 / /tmp rw,nosuid,nodev shared:13 - tmpfs tmpfs rw,size=8G"


def _fixture_executor(cmd, cwd=None):
    """Executor that returns fixture file content for udevadm --export-db."""
    if "udevadm" in cmd and "--export-db" in cmd:
        return RunResult(stdout=(FIXTURES / "udevadm_export_db.txt").read_text(), stderr="", returncode=0)
    return RunResult(stdout="", stderr="unknown command", returncode=1)


def _failing_executor(cmd, cwd=None):
    return RunResult(stdout="", stderr="Failed to open udev database", returncode=1)


class HostTree:
    """Builds the proc/ and sys/ layout the resolvers read."""

    def __init__(self, root: Path):
        self.root = root
        (root / "proc/self").mkdir(parents=True)
        for d in ("sys/block", "sys/class/block", "sys/dev/block", "sys/devices/block"):
            (root / d).mkdir(parents=True)

    def mountinfo(self, *lines: str) -> "HostTree":
        (self.root / "proc/self/mountinfo").write_text("".join(line + "\n" for line in lines))
        return self

    def proc_mounts(self, *lines: str) -> "HostTree":
        (self.root / "proc/mounts").write_text("".join(line + "\n" for line in lines))
        return self

    def block_device(
        self,
        name: str,
        dev: str,
        parent: Optional[str] = None,
        lvm_uuid: Optional[str] = None,
        slaves: Optional[List[str]] = None,
    ) -> "HostTree":
        """
        Register a disk (parent=None) or a partition of parent. Disks also get
        /sys/block/<name>; lvm_uuid adds dm/uuid and slaves adds slaves/ entries.
        """
        if parent is None:
            node = self.root / "sys/devices/block" / name
        else:
            node = self.root / "sys/devices/block" / parent / name
        node.mkdir(parents=True)
        (node / "dev").write_text(dev + "\n")
        if parent is not None:
            (node / "partition").write_text("1\n")
        else:
            (self.root / "sys/block" / name).symlink_to(node)
        (self.root / "sys/class/block" / name).symlink_to(node)
        (self.root / "sys/dev/block" / dev).symlink_to(node)
        if lvm_uuid is not None:
            (node / "dm").mkdir()
            (node / "dm/uuid").write_text(lvm_uuid + "\n")
        if slaves is not None:
            (node / "slaves").mkdir()
            for s in slaves:
                (node / "slaves" / s).mkdir()
        return self


@pytest.fixture
def fixture_executor():
    return _fixture_executor


@pytest.fixture
def failing_executor():
    return _failing_executor


@pytest.fixture
def host(tmp_path) -> HostTree:
    return HostTree(tmp_path)


@pytest.fixture
def ext4_host(host) -> HostTree:
    """Plain layout: / on /dev/sda1."""
    host.block_device("sda", "8:0")
    host.block_device("sda1", "8:1", parent="sda")
    host.mountinfo(EXT4_ROOT, PROC, TMPFS)
    return host


@pytest.fixture
def lvm_host(host) -> HostTree:
    """/ on LVM volume dm-0, whose only physical member is nvme0n1p2."""
    host.block_device("nvme0n1", "259:0")
    host.block_device("nvme0n1p2", "259:2", parent="nvme0n1")
    host.block_device("dm-0", "253:0", lvm_uuid="LVM-Jx5mQ2Xk0cC7kRZb", slaves=["nvme0n1p2"])
    host.mountinfo(
        "22 1 253:0 / / rw,relatime shared:1 - xfs /dev/mapper/vg0-root rw,attr2,inode64",
        PROC,
    )
    return host


@pytest.fixture
def overlay_host(host) -> HostTree:
    """overlayroot: / is an overlay whose lowerdir /media/root-ro lives on /dev/sda1."""
    host.block_device("sda", "8:0")
    host.block_device("sda1", "8:1", parent="sda")
    host.mountinfo(
        "24 1 8:1 / /media/root-ro ro,relatime shared:2 - ext4 /dev/sda1 ro",
        "25 1 0:24 / /media/root-rw rw,relatime shared:3 - tmpfs tmpfs-root rw",
        "26 1 0:25 / / rw,relatime shared:1 - overlay overlayroot "
        "rw,lowerdir=/media/root-ro,upperdir=/media/root-rw/overlay,workdir=/media/root-rw/overlay-workdir",
        PROC,
    )
    host.proc_mounts(
        "/dev/sda1 /media/root-ro ext4 ro,relatime 0 0",
        "tmpfs-root /media/root-rw tmpfs rw,relatime 0 0",
        "overlayroot / overlay rw,relatime,lowerdir=/media/root-ro,upperdir=/media/root-rw/overlay,"
        "workdir=/media/root-rw/overlay-workdir 0 0",
        "proc /proc proc rw,nosuid,nodev,noexec,relatime 0 0",
    )
    return host
