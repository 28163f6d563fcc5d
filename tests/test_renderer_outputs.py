"""
Renderer output tests for the three resolution shapes: plain disk, LVM and overlay.
"""

import json

import pytest

from rootserial.renderers import make_env, render
from rootserial.resolvers import resolve


@pytest.fixture
def plain(ext4_host, fixture_executor):
    return resolve(ext4_host.root, fixture_executor)


@pytest.fixture
def lvm(lvm_host, fixture_executor):
    return resolve(lvm_host.root, fixture_executor)


@pytest.fixture
def overlay(overlay_host, fixture_executor):
    return resolve(overlay_host.root, fixture_executor)


def test_plain(plain):
    assert render(plain) == "Serial: WD-WCC6Y3KZ1234\n"


def test_json_round_trips_key_fields(overlay):
    data = json.loads(render(overlay, "json"))
    assert data["root_mount"]["mount_point"] == "/media/root-ro"
    assert data["overlay_mount"]["source"] == "overlayroot"
    assert data["device"]["devname"] == "/dev/sda1"


def test_report_plain_disk(plain):
    text = render(plain, "report", make_env())
    assert "mount point:  /" in text
    assert "device id:    8:1" in text
    assert "kind:         regular" in text
    assert "devname:      /dev/sda1" in text
    assert "Serial:         WD-WCC6Y3KZ1234 (ID_SERIAL_SHORT)" in text
    assert "Overlay" not in text
    assert "slaves dir" not in text


def test_report_lvm(lvm):
    text = render(lvm, "report")
    assert "kind:         lvm" in text
    assert "slaves dir:" in text and text.count("dm-0") >= 1
    assert "name:         nvme0n1p2" in text


def test_report_overlay(overlay):
    text = render(overlay, "report")
    assert "Overlay\n  source:       overlayroot" in text
    assert "lowerdir:     /media/root-ro" in text


def test_properties_sorted(plain):
    lines = render(plain, "properties").splitlines()
    assert lines[0].startswith("# sda1 (")
    keys = [l.split("=", 1)[0] for l in lines[1:]]
    assert keys == sorted(keys)
    assert "ID_SERIAL_SHORT=WD-WCC6Y3KZ1234" in lines


def test_unknown_format(plain):
    with pytest.raises(ValueError):
        render(plain, "yaml")
