"""Tests for command-line interface help output."""

import shutil
import subprocess


def test_help_hides_internal_options() -> None:
    """`ytsections --help` does not expose internal parameters like status_callback."""
    exe = shutil.which("ytsections")
    assert exe
    result = subprocess.run(  # noqa: S603
        [exe, "--help"],
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=True,
    )
    assert "status-callback" not in result.stdout
