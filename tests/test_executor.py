"""Tests for the subprocess executor."""

import sys

from rootserial.executor import make_executor, subprocess_executor


def test_missing_command():
    r = subprocess_executor(["rootserial-no-such-command"])
    assert r.returncode == 127
    assert "command not found" in r.stderr


def test_runs_with_c_locale(tmp_path):
    run = make_executor(str(tmp_path))
    r = run([sys.executable, "-c", "import os; print(os.environ['LC_ALL'], os.getcwd())"])
    assert r.returncode == 0
    lc_all, cwd = r.stdout.split()
    assert lc_all == "C"
    assert cwd == str(tmp_path.resolve())


def test_undecodable_output_is_replaced():
    r = subprocess_executor([sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'sda\\xff\\n')"])
    assert r.returncode == 0
    assert r.stdout == "sda\ufffd\n"
