"""Human-readable resolution report: how "/" was traced to a physical device."""

from jinja2 import Environment

from ..schema import Resolution

TEMPLATE = """\
Root mount
  mount point:  {{ r.root_mount.mount_point }}
  source:       {{ r.root_mount.source }}
  type:         {{ r.root_mount.fs_type }}
  device id:    {{ r.root_mount.device_id }}

{% if r.overlay_mount %}
Overlay
  source:       {{ r.overlay_mount.source }}
  type:         {{ r.overlay_mount.fs_type }}
  lowerdir:     {{ r.root_mount.mount_point }}

{% endif %}
Disk
  name:         {{ r.disk.name }}
  kind:         {{ r.disk.kind }}
{% if r.disk.kind == "lvm" %}
  slaves dir:   {{ r.disk.slaves_dir }}
{% endif %}

Device
  name:         {{ r.device_name }}
  devpath:      {{ r.device.devpath }}
{% if r.device.devname %}
  devname:      {{ r.device.devname }}
{% endif %}

Serial:         {{ r.serial }} ({{ r.serial_source.value }})
"""


def render(resolution: Resolution, env: Environment) -> str:
    return env.from_string(TEMPLATE).render(r=resolution)
