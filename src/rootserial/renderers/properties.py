"""udev property dump of the resolved device, sorted by key."""

from jinja2 import Environment

from ..schema import Resolution

TEMPLATE = """\
# {{ device.sysname }} ({{ device.devpath }})
{% for key, value in device.properties | dictsort(true) %}
{{ key }}={{ value }}
{% endfor %}
"""


def render(resolution: Resolution, env: Environment) -> str:
    return env.from_string(TEMPLATE).render(device=resolution.device)
