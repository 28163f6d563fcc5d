"""Mount option strings: ``rw,relatime,lowerdir=/a,upperdir=/b``."""

import re
from typing import Dict, Iterable, List, Optional

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def unescape(field: str) -> str:
    """Undo the kernel's octal escaping of spaces, tabs, newlines and backslashes in /proc tables."""
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


def split_option_string(text: str) -> List[str]:
    return [opt for opt in text.split(",") if opt]


def parse_options(options: Iterable[str]) -> Dict[str, Optional[str]]:
    """
    Map option name to value. Bare flags (``ro``) map to None.
    The first occurrence of a key wins; empty items are ignored.
    """
    parsed: Dict[str, Optional[str]] = {}
    for opt in options:
        if not opt:
            continue
        key, sep, value = opt.partition("=")
        if key in parsed:
            continue
        parsed[key] = value if sep else None
    return parsed


def option_value(options: Iterable[str], key: str) -> Optional[str]:
    """Value of key=value, or None when absent, bare or empty."""
    value = parse_options(options).get(key)
    return value or None
