"""
Renderers turn a Resolution into text for stdout.
Each renderer receives the resolution and a shared jinja2 Environment.
"""

from typing import Optional

from jinja2 import Environment

from ..schema import Resolution

from .properties import render as render_properties
from .report import render as render_report

FORMATS = ("plain", "json", "report", "properties")


def make_env() -> Environment:
    return Environment(keep_trailing_newline=True, trim_blocks=True, lstrip_blocks=True)


def render(resolution: Resolution, fmt: str = "plain", env: Optional[Environment] = None) -> str:
    if fmt == "plain":
        return f"Serial: {resolution.serial}\n"
    if fmt == "json":
        return resolution.model_dump_json(indent=2) + "\n"
    if env is None:
        env = make_env()
    if fmt == "report":
        return render_report(resolution, env)
    if fmt == "properties":
        return render_properties(resolution, env)
    raise ValueError(f"unknown output format: {fmt}")
