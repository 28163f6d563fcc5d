"""Entry point: ``rootserial`` / ``python -m rootserial``."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .cli import parse_args
from .errors import SerialResolutionError
from .executor import Executor, make_executor
from .renderers import render
from .schema import Resolution


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run_resolution(host_root: Path, executor: Optional[Executor] = None) -> Resolution:
    from .resolvers import resolve
    if executor is None:
        executor = make_executor(str(host_root))
    return resolve(host_root, executor=executor)


def main(argv: Optional[List[str]] = None, executor: Optional[Executor] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        resolution = _run_resolution(args.host_root, executor)
    except SerialResolutionError as e:
        print(f"error: {e.describe(with_cause=args.verbose)}", file=sys.stderr)
        return 1
    sys.stdout.write(render(resolution, args.fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
