"""base16384: Base16384 binary-to-text codec

A Python implementation of Base16384, an encoding that packs every 7 bytes of
binary data into four 16-bit code words. The code words are UTF-16BE text in
the band U+4E00..U+8DFF, so the output survives any UTF-16/UTF-8 pipeline while
being denser than Base64.

Key Features:
- Wire-compatible with other Base16384 implementations
- Zero-copy friendly ``encode_into`` / ``decode_into`` with checked capacity
- Pydantic-based layout descriptions
- Pure Python implementation

Quick Start:
    >>> from base16384 import decode, encode
    >>>
    >>> data = encode(b"hello")
    >>> data.hex()
    '681964c67fbc3d05'
    >>> decode(data)
    b'hello'
    >>> text = data.decode("utf-16-be")  # printable form
"""

from __future__ import annotations

from .codec import decode, decode_into, encode, encode_into, tail_count
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    Base16384Error,
    CapacityError,
    DecodeError,
    InvalidInputLengthError,
    MalformedTailError,
)
from .models import EncodedLayout, TailMarker
from .utils import (
    decode_length,
    decoded_size,
    describe_layout,
    encode_length,
    encoded_size,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_into",
    "decode_into",
    "tail_count",
    # Sizing
    "encode_length",
    "decode_length",
    "encoded_size",
    "decoded_size",
    "describe_layout",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Models
    "EncodedLayout",
    "TailMarker",
    # Exceptions
    "Base16384Error",
    "DecodeError",
    "CapacityError",
    "MalformedTailError",
    "InvalidInputLengthError",
    # Version
    "__version__",
]
