"""Base16384 decoder.

This module provides ``decode_into()``, the inverse of ``encode_into()``, the
allocating ``decode()`` wrapper, and ``tail_count()`` for inspecting the
trailing ``=`` marker before sizing a buffer.
"""

from __future__ import annotations

from ..config import CodecConfig, resolve_config
from ..constants import (
    ENCODED_GROUP_BYTES,
    GROUP_BYTES,
    MARKER_BYTES,
    MAX_LEFTOVER,
    TAIL_MARKER,
    WORD_BYTES,
)
from ..exceptions import CapacityError, InvalidInputLengthError, MalformedTailError
from ..utils.byteorder import MASK64, load_be64
from ..utils.sizing import decode_length, tail_delta
from .bitpack import BODY_OFFSET, from_code_words, unpack_fields
from .buffers import BytesLike, writable_view


def tail_count(data: BytesLike) -> int:
    """Return the leftover byte count announced by the trailing marker.

    Code word high bytes are always 0x4E-0x8D, so an ``=`` (0x3D) in the
    second-to-last position can only be a marker.

    Args:
        data: Encoded bytes

    Returns:
        Leftover count 1-6, or 0 when there is no marker

    Raises:
        MalformedTailError: If the count is outside 1-6 or the marker has too
            few code words in front of it

    Example:
        >>> tail_count(bytes.fromhex("5e403d01"))
        1
        >>> tail_count(bytes.fromhex("4e406e305e145407"))
        0
    """
    source = bytes(data)
    if len(source) < MARKER_BYTES or source[-2] != TAIL_MARKER:
        return 0

    leftover = source[-1]
    if not 1 <= leftover <= MAX_LEFTOVER:
        raise MalformedTailError(f"Tail marker count must be 1-{MAX_LEFTOVER}, got {leftover}")

    if len(source) < tail_delta(leftover):
        raise MalformedTailError(
            f"Tail marker for {leftover} bytes needs {tail_delta(leftover)} bytes of input, "
            f"got {len(source)}"
        )

    return leftover


def decode_into(
    data: BytesLike, output: bytearray | memoryview, *, config: CodecConfig | None = None
) -> int:
    """Decode Base16384 code words into a caller-supplied buffer.

    Args:
        data: Encoded bytes (UTF-16BE code words, optional tail marker)
        output: Writable buffer of at least
            ``decode_length(len(data), tail_count(data))`` bytes
        config: Sizing and strictness options (default: ``DEFAULT_CONFIG``)

    Returns:
        Number of decoded bytes written to ``output``

    Raises:
        InvalidInputLengthError: If data has an odd length, or (strict mode) its
            body is not a whole number of 8-byte groups
        MalformedTailError: If the tail marker is invalid
        CapacityError: If output is too small
        TypeError: If output is not writable
    """
    source = bytes(data)
    view = writable_view(output)
    cfg = resolve_config(config)

    if not source:
        return 0

    if len(source) % WORD_BYTES:
        raise InvalidInputLengthError(
            f"Encoded data must be a whole number of 16-bit code words, got {len(source)} bytes"
        )

    leftover = tail_count(source)
    body_length = len(source) - tail_delta(leftover)

    groups, partial = divmod(body_length, ENCODED_GROUP_BYTES)
    if partial and cfg.strict:
        raise InvalidInputLengthError(
            f"Encoded body must be a multiple of {ENCODED_GROUP_BYTES} bytes, "
            f"got {body_length} ({partial} trailing bytes)"
        )

    required = decode_length(len(source), leftover, config=cfg)
    if len(view) < required:
        raise CapacityError(required, len(view), "decode")

    position = 0
    for offset in range(0, groups * ENCODED_GROUP_BYTES, ENCODED_GROUP_BYTES):
        fields = (load_be64(source, offset) - BODY_OFFSET) & MASK64
        view[position : position + GROUP_BYTES] = unpack_fields(fields)
        position += GROUP_BYTES

    if leftover:
        tail_start = len(source) - tail_delta(leftover)
        words = source[tail_start : len(source) - MARKER_BYTES]
        view[position : position + leftover] = unpack_fields(from_code_words(words))[:leftover]
        position += leftover

    return position


def decode(data: BytesLike, *, config: CodecConfig | None = None) -> bytes:
    """Decode Base16384 code words back to binary data.

    Args:
        data: Encoded bytes; for text use ``text.encode("utf-16-be")``
        config: Sizing and strictness options (default: ``DEFAULT_CONFIG``)

    Returns:
        Original binary data

    Raises:
        DecodeError: If data is not valid Base16384

    Example:
        >>> decode(bytes.fromhex("5e403d01"))
        b'A'
    """
    source = bytes(data)
    leftover = tail_count(source) if len(source) % WORD_BYTES == 0 else 0
    buffer = bytearray(decode_length(len(source), leftover, config=config))
    written = decode_into(source, buffer, config=config)
    return bytes(buffer[:written])
