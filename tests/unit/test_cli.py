"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from crcsum.cli.main import main
from crcsum.cli.report import compute_all, parse_hex, report_bytes


def run_cli(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "crcsum.cli.main", *args],
        input=stdin,
        capture_output=True,
        text=True,
    )


def test_cli_no_arguments_prints_usage() -> None:
    """Test CLI without arguments prints usage and exits with 0."""
    result = run_cli()
    assert result.returncode == 0
    assert "usage:" in result.stdout
    assert "--ascii" in result.stdout
    assert "--hex" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert "crcsum 0.1.0" in result.stdout


def test_cli_ascii_input() -> None:
    """Test CLI -a reads a line of text from stdin."""
    result = run_cli("-a", stdin="123456789\n")
    assert result.returncode == 0
    assert '"123456789" :' in result.stdout
    assert "CRC16              = 0xBB3D" in result.stdout
    assert "0x4B37" in result.stdout
    assert "0x29B1" in result.stdout
    assert "0x8921" in result.stdout
    assert "0xCBF43926" in result.stdout
    assert "3421780262" in result.stdout


def test_cli_hex_input() -> None:
    """Test CLI -x reads hexadecimal digits from stdin."""
    result = run_cli("-x", stdin="31 32 33 34 35 36 37 38 39\n")
    assert result.returncode == 0
    assert "0xBB3D" in result.stdout
    assert "0xCBF43926" in result.stdout
    assert "0x6C40DF5F0B497347" in result.stdout


def test_cli_files(tmp_path: Path) -> None:
    """Test CLI with a missing file continues with the next one."""
    data_file = tmp_path / "check.txt"
    data_file.write_bytes(b"123456789")
    missing = tmp_path / "missing.bin"

    result = run_cli(str(missing), str(data_file))
    assert result.returncode == 0
    assert f"{missing} : cannot open file" in result.stdout
    assert f"{data_file} :" in result.stdout
    assert "0xCBF43926" in result.stdout


def test_main_in_process(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test the entry point can be called directly."""
    data_file = tmp_path / "empty.bin"
    data_file.write_bytes(b"")

    assert main([str(data_file)]) == 0

    out = capsys.readouterr().out
    assert "CRC-CCITT (0xffff) = 0xFFFF" in out
    assert "CRC-DNP" in out


class TestReportHelpers:
    """Test the report helpers used by the CLI."""

    def test_parse_hex(self) -> None:
        """Test hex parsing skips separators and pads odd nibbles."""
        assert parse_hex("3132") == b"12"
        assert parse_hex("31:32 aB") == b"12\xab"
        assert parse_hex("313") == b"10"
        assert parse_hex("") == b""

    def test_compute_all(self) -> None:
        """Test streaming through every variant gives the one-pass results."""
        results = compute_all(iter(b"123456789"))

        assert results["crc-16"] == 0xBB3D
        assert results["crc-kermit"] == 0x8921
        assert results["crc-dnp"] == 0x82EA
        assert results["crc-64/we"] == 0x62EC59E3F1A4F00A


def test_cli_on_example_file() -> None:
    """Test CLI with a real example file."""
    example_file = Path("examples/basic_usage.py")
    if not example_file.exists():
        pytest.skip("Example file not found")

    result = run_cli(str(example_file))
    assert result.returncode == 0
    assert "basic_usage.py :" in result.stdout
    assert "CRC64 (WE)" in result.stdout


def test_cli_uppercase_mode_flags() -> None:
    """Test -A and -X behave like -a and -x."""
    ascii_result = run_cli("-A", stdin="123456789\n")
    hex_result = run_cli("-X", stdin="313233343536373839\n")

    assert ascii_result.returncode == 0
    assert hex_result.returncode == 0
    assert "0xCBF43926" in ascii_result.stdout
    assert "0xCBF43926" in hex_result.stdout


def test_report_without_variants(capsys: pytest.CaptureFixture[str]) -> None:
    """Test an empty variant selection prints only the title."""
    report_bytes('"abc"', b"abc", sys.stdout, variants=[])

    assert capsys.readouterr().out == '"abc" :\n'
