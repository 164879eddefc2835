"""Unit Tests for the demonstration driver"""
import subprocess
import sys

import pytest

from carlib.__main__ import main


@pytest.mark.parametrize("args", [[], ["-v"], ["-vv"]])
def test_main(capsys: pytest.CaptureFixture, args: list):
    """The driver prints the final speed and nothing else on stdout"""
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.out == "Speed: 10\n"


def test_module_entry_point():
    """Running the package as a script exits cleanly"""
    result = subprocess.run(
        [sys.executable, "-m", "carlib"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert result.stdout == "Speed: 10\n"
