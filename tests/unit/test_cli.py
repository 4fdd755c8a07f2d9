"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

from pgcube import __version__

POINT_HEX = "80000003" "3ff0000000000000" "4000000000000000" "4008000000000000"
BOX_HEX = "00000001" "0000000000000000" "4014000000000000"


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "pgcube.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "pgcube: binary protocol codec" in result.stdout
    assert "--decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert f"pgcube {__version__}" in result.stdout


def test_cli_decode_point() -> None:
    """Test CLI --decode with a point payload."""
    result = _run("--decode", POINT_HEX)
    assert result.returncode == 0
    assert "Point (3 dimensions)" in result.stdout
    assert "0x80000003" in result.stdout
    assert "Encoded size: 28 bytes" in result.stdout
    assert "Text form: (1, 2, 3)" in result.stdout
    assert "upper_right" not in result.stdout


def test_cli_decode_box_with_prefix_and_spaces() -> None:
    """Test CLI --decode accepts 0x prefix and whitespace."""
    spaced = " ".join(BOX_HEX[i : i + 8] for i in range(0, len(BOX_HEX), 8))
    result = _run("--decode", "0x" + spaced)
    assert result.returncode == 0
    assert "Box (1 dimension)" in result.stdout
    assert "Text form: (0),(5)" in result.stdout


def test_cli_invalid_hex() -> None:
    """Test CLI with a non-hex payload."""
    result = _run("--decode", "zz")
    assert result.returncode == 1
    assert "invalid hex" in result.stderr


def test_cli_truncated_payload() -> None:
    """Test CLI with a truncated payload."""
    result = _run("--decode", POINT_HEX[:-2])
    assert result.returncode == 1
    assert "Error decoding payload" in result.stderr


def test_cli_max_dimensions() -> None:
    """Test CLI --max-dimensions bound."""
    result = _run("--decode", POINT_HEX, "--max-dimensions", "2")
    assert result.returncode == 1
    assert "maximum is 2" in result.stderr


def test_cli_verbose_logs_rejection() -> None:
    """Test CLI --verbose emits codec diagnostics."""
    result = _run("--decode", POINT_HEX, "--max-dimensions", "2", "--verbose")
    assert result.returncode == 1
    assert "Rejecting cube header" in result.stderr


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "pgcube: binary protocol codec" in result.stdout


def test_cli_empty_payload() -> None:
    """Test CLI --decode with an empty payload fails instead of showing help."""
    result = _run("--decode", "")
    assert result.returncode == 1
    assert "Error decoding payload" in result.stderr
    assert "usage:" not in result.stdout
