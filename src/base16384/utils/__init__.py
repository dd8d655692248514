"""Utility functions for base16384.

This module provides byte-order helpers and buffer size calculation.
"""

from __future__ import annotations

from .byteorder import MASK64, lane_offset, load_be64, store_be64
from .sizing import (
    decode_length,
    decoded_size,
    describe_layout,
    encode_length,
    encoded_size,
    tail_delta,
    tail_lanes,
)

__all__ = [
    # Byte order
    "MASK64",
    "lane_offset",
    "load_be64",
    "store_be64",
    # Sizing
    "encode_length",
    "decode_length",
    "encoded_size",
    "decoded_size",
    "describe_layout",
    "tail_delta",
    "tail_lanes",
]
