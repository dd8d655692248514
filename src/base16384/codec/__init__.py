"""Base16384 codec.

This module provides encoding and decoding between binary data and
Base16384 code words, packing 7 bytes into four 16-bit code words.
"""

from __future__ import annotations

from .decoder import decode, decode_into, tail_count
from .encoder import encode, encode_into

__all__ = [
    "encode",
    "encode_into",
    "decode",
    "decode_into",
    "tail_count",
]
