"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from base16384 import CodecConfig


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing (24 bytes: 3 groups + 3 leftover)."""
    return b"Hello, Base16384 world!!"


@pytest.fixture
def exact_config() -> CodecConfig:
    """Configuration without any buffer slack."""
    return CodecConfig(encode_slack=0, decode_slack=0, safety_margin=0)


@pytest.fixture
def lenient_config() -> CodecConfig:
    """Configuration that ignores a trailing partial group when decoding."""
    return CodecConfig(strict=False)
