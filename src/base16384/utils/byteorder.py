"""Big-endian load/store helpers.

All lane arithmetic is done on plain Python integers; these helpers are the
single place where values are normalized to and from big-endian storage, so
the wire format never depends on the host byte order.
"""

from __future__ import annotations

import struct

_BE64 = struct.Struct(">Q")

MASK64 = 0xFFFF_FFFF_FFFF_FFFF


def load_be64(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read 8 bytes at ``offset`` as an unsigned big-endian integer.

    Args:
        buffer: Source buffer
        offset: Byte offset of the first byte

    Returns:
        Unsigned 64-bit value

    Raises:
        struct.error: If fewer than 8 bytes are available at ``offset``
    """
    return _BE64.unpack_from(buffer, offset)[0]


def store_be64(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write ``value`` as 8 big-endian bytes at ``offset``.

    Args:
        buffer: Writable destination buffer
        offset: Byte offset of the first byte
        value: Value to store; bits above 64 are discarded
    """
    _BE64.pack_into(buffer, offset, value & MASK64)


def lane_offset(base: int, lanes: int) -> int:
    """Replicate a 16-bit ``base`` into the first ``lanes`` big-endian lanes.

    Lane 0 is the most significant 16 bits of the 64-bit word.

    Example:
        >>> hex(lane_offset(0x4E00, 2))
        '0x4e004e0000000000'
    """
    if not 0 <= lanes <= 4:
        raise ValueError(f"lanes must be 0-4, got {lanes}")

    value = 0
    for lane in range(lanes):
        value |= base << (48 - 16 * lane)
    return value
