"""Tests for CLI tool."""

from __future__ import annotations

import logging
import os
import subprocess
import sys

import pytest

from base16384 import __version__
from base16384.cli.main import main


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    return subprocess.run(
        [sys.executable, "-m", "base16384.cli.main", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "base16384: Base16384 Codec" in result.stdout
    assert "--analyze" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert f"base16384 {__version__}" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "base16384: Base16384 Codec" in result.stdout


def test_cli_encode_subprocess() -> None:
    """Test encoding through the module entry point."""
    result = _run("--encode", "hello")
    assert result.returncode == 0
    assert result.stdout.strip() == "栙擆羼㴅"


def test_cli_encode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode with UTF-8 text."""
    assert main(["--encode", "hello"]) == 0
    assert capsys.readouterr().out.strip() == "栙擆羼㴅"


def test_cli_encode_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode with hex input."""
    assert main(["--encode", "41", "--hex"]) == 0
    assert capsys.readouterr().out.strip() == "幀㴁"


def test_cli_decode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --decode to UTF-8 text."""
    assert main(["--decode", "栙擆羼㴅"]) == 0
    assert capsys.readouterr().out.strip() == "hello"


def test_cli_decode_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --decode with hex output."""
    assert main(["--decode", "乀渰帔吇", "--hex"]) == 0
    assert capsys.readouterr().out.strip() == "01020304050607"


def test_cli_decode_malformed(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --decode with a bad tail marker."""
    assert main(["--decode", "幀㴉"]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_encode_bad_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode --hex with invalid hex."""
    assert main(["--encode", "zz", "--hex"]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_analyze(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --analyze output."""
    assert main(["--analyze", "12"]) == 0
    out = capsys.readouterr().out
    assert "base16384: Base16384 Codec" in out
    assert "leftover bytes" in out
    assert "encoded length" in out


def test_cli_analyze_negative(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --analyze with a negative length."""
    assert main(["--analyze", "-5"]) == 1
    assert "LENGTH must be >= 0" in capsys.readouterr().err


def test_cli_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that --verbose logs to stderr."""
    logger = logging.getLogger("base16384")
    try:
        assert main(["--encode", "hi", "--verbose"]) == 0
        assert "Encoded 2 bytes into 6 bytes" in capsys.readouterr().err
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
