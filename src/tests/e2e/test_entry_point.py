"""End-to-end tests running the package as a process."""

import os
import subprocess
import sys
from pathlib import Path

from task_manager.banner import BANNER_LINES

SRC_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str) -> subprocess.CompletedProcess:
    env = {
        "PATH": os.environ.get("PATH", ""),
        "PYTHONPATH": str(SRC_ROOT),
        "PYTHONIOENCODING": "utf-8",
    }
    return subprocess.run(
        [sys.executable, "-m", "task_manager", *args],
        stdin=subprocess.DEVNULL,
        capture_output=True,
        env=env,
        timeout=30,
    )


class TestEntryPoint:
    """Tests for python -m task_manager."""

    def test_banner_and_clean_exit(self) -> None:
        """Test no-argument run prints the banner and exits 0."""
        proc = _run()

        assert proc.returncode == 0
        assert proc.stdout.decode("utf-8").splitlines() == list(BANNER_LINES)

    def test_check_rejects_invalid_value(self) -> None:
        """Test check subcommand exits 1 for an unlisted value."""
        proc = _run("check", "project-status", "paused")

        assert proc.returncode == 1
        assert proc.stdout == b""
        assert b"Error [VALIDATION]" in proc.stderr
