"""Command-line arguments for rootserial."""

import argparse
from pathlib import Path
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rootserial",
        description="Print the hardware serial of the physical disk backing the root filesystem.",
    )
    parser.add_argument(
        "--host-root",
        type=Path,
        default=Path("/"),
        help="Root under which proc/ and sys/ are read (default: /)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        dest="fmt",
        action="store_const",
        const="json",
        help="Print the full resolution as JSON",
    )
    output.add_argument(
        "--report",
        dest="fmt",
        action="store_const",
        const="report",
        help="Print how the root filesystem was traced to its device",
    )
    output.add_argument(
        "--properties",
        dest="fmt",
        action="store_const",
        const="properties",
        help="Print every udev property of the resolved device",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each resolution step and include underlying causes in errors",
    )
    parser.set_defaults(fmt="plain")
    return parser.parse_args(argv)
