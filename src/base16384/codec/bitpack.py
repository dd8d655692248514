"""14-bit field packing for 7-byte groups.

Seven input bytes are 56 bits, split into four 14-bit fields. Each field is
left in its own 16-bit lane of a 64-bit word; adding the base offset to every
lane turns the word into four code words in the ``0x4E00..0x8DFF`` band.

The shift/mask constants are a fixed wire contract shared with every other
Base16384 implementation. Partial groups reuse them by zero-padding the
leftover bytes to a full group.
"""

from __future__ import annotations

from ..constants import BASE, ENCODED_GROUP_BYTES, GROUP_BYTES, GROUP_WORDS, WORD_BYTES
from ..utils.byteorder import MASK64, lane_offset

BODY_OFFSET = lane_offset(BASE, GROUP_WORDS)  # 0x4E004E004E004E00

_PACK_MASKS = (
    0x3FFF_0000_0000_0000,
    0x0000_3FFF_0000_0000,
    0x0000_0000_3FFF_0000,
    0x0000_0000_0000_3FFF,
)

_UNPACK_MASKS = (
    0xFFFC_0000_0000_0000,
    0x0003_FFF0_0000_0000,
    0x0000_000F_FFC0_0000,
    0x0000_0000_003F_FF00,
)


def pack_fields(chunk: bytes) -> int:
    """Split up to 7 bytes into four lane-aligned 14-bit fields.

    Args:
        chunk: 1-7 bytes; shorter chunks are zero-padded on the right

    Returns:
        64-bit value with one 14-bit field in the low bits of each 16-bit lane,
        without the base offset

    Raises:
        ValueError: If chunk is empty or longer than 7 bytes

    Example:
        >>> hex(pack_fields(bytes([1, 2, 3, 4, 5, 6, 7])))
        '0x40203010140607'
    """
    if not 0 < len(chunk) <= GROUP_BYTES:
        raise ValueError(f"chunk must be 1-{GROUP_BYTES} bytes, got {len(chunk)}")

    # Eighth byte is the look-ahead slot; it only ever feeds masked-off bits.
    shift = int.from_bytes(chunk.ljust(ENCODED_GROUP_BYTES, b"\x00"), "big") >> 2
    fields = 0
    for mask in _PACK_MASKS:
        fields |= shift & mask
        shift >>= 2
    return fields


def unpack_fields(fields: int) -> bytes:
    """Reassemble the 7 bytes carried by four lane-aligned 14-bit fields.

    This is the exact inverse of :func:`pack_fields` for full groups.

    Args:
        fields: 64-bit value with the base offset already removed

    Returns:
        7 bytes
    """
    shift = fields & MASK64
    result = 0
    for mask in _UNPACK_MASKS:
        shift <<= 2
        result |= shift & mask
    return result.to_bytes(ENCODED_GROUP_BYTES, "big")[:GROUP_BYTES]


def to_code_words(fields: int, lanes: int = GROUP_WORDS) -> bytes:
    """Offset the first ``lanes`` fields into the safe band and serialize them.

    Args:
        fields: Output of :func:`pack_fields`
        lanes: Number of leading lanes to emit (1-4)

    Returns:
        ``2 * lanes`` big-endian bytes
    """
    words = (fields + lane_offset(BASE, lanes)) & MASK64
    return words.to_bytes(ENCODED_GROUP_BYTES, "big")[: lanes * WORD_BYTES]


def from_code_words(words: bytes) -> int:
    """Strip the base offset from 1-4 big-endian code words.

    Missing trailing lanes read as empty fields, so a partial tail decodes with
    the same reassembly as a full group.

    Args:
        words: 2, 4, 6 or 8 bytes of code words

    Returns:
        Lane-aligned fields suitable for :func:`unpack_fields`
    """
    lanes, odd = divmod(len(words), WORD_BYTES)
    if odd or not 0 < lanes <= GROUP_WORDS:
        raise ValueError(f"expected 1-{GROUP_WORDS} code words, got {len(words)} bytes")

    value = int.from_bytes(words.ljust(ENCODED_GROUP_BYTES, b"\x00"), "big")
    return (value - lane_offset(BASE, lanes)) & MASK64
