"""
Command execution abstraction.

The udev lookup never calls subprocess directly; it goes through an executor
so tests can hand back canned udevadm output instead of querying the host.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Protocol

# udevadm reads resident metadata; anything slower than this is a hung daemon
COMMAND_TIMEOUT = 30


@dataclass
class RunResult:
    """Captured output of one command."""

    stdout: str
    stderr: str
    returncode: int


class Executor(Protocol):
    def __call__(self, cmd: List[str], *, cwd: Optional[str] = None) -> RunResult:
        ...


def subprocess_executor(
    cmd: List[str],
    *,
    cwd: Optional[str] = None,
    timeout: int = COMMAND_TIMEOUT,
) -> RunResult:
    """Run cmd with a C locale so output is parseable. Never raises for command failures."""
    import subprocess
    env = dict(os.environ, LC_ALL="C")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
            env=env,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        return RunResult(stdout="", stderr=f"{cmd[0]} timed out after {e.timeout}s", returncode=-1)
    except FileNotFoundError:
        return RunResult(stdout="", stderr=f"{cmd[0]}: command not found", returncode=127)
    except PermissionError as e:
        return RunResult(stdout="", stderr=f"{cmd[0]}: {e.strerror}", returncode=126)
    return RunResult(stdout=result.stdout or "", stderr=result.stderr or "", returncode=result.returncode)


def make_executor(host_root: str = "/") -> Executor:
    """Executor running commands from host_root."""
    def run(cmd: List[str], *, cwd: Optional[str] = None) -> RunResult:
        return subprocess_executor(cmd, cwd=cwd or host_root)
    return run
