"""Base16384 encoder.

This module provides ``encode_into()``, which packs binary data into a
caller-supplied buffer of big-endian code words, and ``encode()``, which
allocates that buffer itself.
"""

from __future__ import annotations

from ..config import CodecConfig
from ..constants import ENCODED_GROUP_BYTES, GROUP_BYTES
from ..exceptions import CapacityError
from ..models.layout import TailMarker
from ..utils.byteorder import store_be64
from ..utils.sizing import encode_length, tail_lanes
from .bitpack import BODY_OFFSET, pack_fields, to_code_words
from .buffers import BytesLike, writable_view


def encode_into(
    data: BytesLike, output: bytearray | memoryview, *, config: CodecConfig | None = None
) -> int:
    """Encode binary data into a caller-supplied buffer.

    Full 7-byte groups become four code words each. A partial final group of
    ``r`` bytes becomes 1-4 code words followed by the marker ``b"=" + bytes([r])``.

    Args:
        data: Binary data to encode (any bytes-like object)
        output: Writable buffer of at least ``encode_length(len(data))`` bytes
        config: Sizing options (default: ``DEFAULT_CONFIG``)

    Returns:
        Number of meaningful bytes written to ``output``

    Raises:
        CapacityError: If output is smaller than ``encode_length(len(data))``
        TypeError: If output is not writable

    Example:
        >>> out = bytearray(encode_length(1))
        >>> n = encode_into(b"A", out)
        >>> bytes(out[:n]).hex()
        '5e403d01'
    """
    source = bytes(data)
    view = writable_view(output)

    required = encode_length(len(source), config=config)
    if len(view) < required:
        raise CapacityError(required, len(view), "encode")

    groups, leftover = divmod(len(source), GROUP_BYTES)
    position = 0

    for start in range(0, groups * GROUP_BYTES, GROUP_BYTES):
        fields = pack_fields(source[start : start + GROUP_BYTES])
        store_be64(view, position, fields + BODY_OFFSET)
        position += ENCODED_GROUP_BYTES

    if leftover:
        words = to_code_words(pack_fields(source[-leftover:]), tail_lanes(leftover))
        view[position : position + len(words)] = words
        position += len(words)
        marker = TailMarker(count=leftover).to_bytes()
        view[position : position + len(marker)] = marker
        position += len(marker)

    return position


def encode(data: BytesLike, *, config: CodecConfig | None = None) -> bytes:
    """Encode binary data to Base16384 (UTF-16BE code words).

    Args:
        data: Binary data to encode
        config: Sizing options (default: ``DEFAULT_CONFIG``)

    Returns:
        Encoded bytes; ``encoded.decode("utf-16-be")`` gives the text form

    Examples:
        ```python
        from base16384 import decode, encode

        encoded = encode(b"hello")
        assert encoded.hex() == "681964c67fbc3d05"
        assert decode(encoded) == b"hello"
        ```
    """
    source = bytes(data)
    buffer = bytearray(encode_length(len(source), config=config))
    written = encode_into(source, buffer, config=config)
    return bytes(buffer[:written])
