"""Buffer size calculation utilities.

This module provides functions to calculate encoded and decoded sizes without
running the codec. The ``*_length`` calculators return buffer capacities
(exact size plus the configured slack); the ``*_size`` functions return the
exact number of meaningful bytes the codec reports.
"""

from __future__ import annotations

from ..constants import (
    ENCODED_GROUP_BYTES,
    GROUP_BYTES,
    MARKER_BYTES,
    MAX_LEFTOVER,
    TAIL_DELTA,
    WORD_BYTES,
)
from ..config import CodecConfig, resolve_config
from ..models.layout import EncodedLayout


def tail_delta(leftover: int) -> int:
    """Return the encoded bytes a partial group of ``leftover`` bytes occupies.

    The count includes the 2-byte ``=`` marker.

    Args:
        leftover: Leftover byte count (0-6)

    Returns:
        0, 4, 6, 6, 8, 8 or 10

    Raises:
        ValueError: If leftover is outside 0-6
    """
    if not 0 <= leftover <= MAX_LEFTOVER:
        raise ValueError(f"leftover must be 0-{MAX_LEFTOVER}, got {leftover}")
    return TAIL_DELTA[leftover]


def tail_lanes(leftover: int) -> int:
    """Return the number of code words emitted for ``leftover`` bytes."""
    delta = tail_delta(leftover)
    if delta == 0:
        return 0
    return (delta - MARKER_BYTES) // WORD_BYTES


def encoded_size(data_length: int) -> int:
    """Calculate the exact encoded size of ``data_length`` input bytes.

    Example:
        >>> encoded_size(7)
        8
        >>> encoded_size(1)
        4
    """
    _check_length(data_length)
    groups, leftover = divmod(data_length, GROUP_BYTES)
    return groups * ENCODED_GROUP_BYTES + TAIL_DELTA[leftover]


def decoded_size(encoded_length: int, leftover: int = 0) -> int:
    """Calculate the exact decoded size of an encoded buffer.

    Args:
        encoded_length: Encoded length in bytes, marker included
        leftover: Leftover count announced by the tail marker (0 if none)

    Returns:
        Number of original bytes
    """
    _check_length(encoded_length)
    body = max(encoded_length - tail_delta(leftover), 0)
    return body // ENCODED_GROUP_BYTES * GROUP_BYTES + leftover


def encode_length(data_length: int, *, config: CodecConfig | None = None) -> int:
    """Calculate the output capacity needed to encode ``data_length`` bytes.

    With the default configuration this is the exact size plus 8 bytes of
    trailing slack and a 16 byte safety margin. Callers must truncate to the
    count returned by the encoder, never to this capacity.

    Args:
        data_length: Input length in bytes
        config: Sizing options (default: ``DEFAULT_CONFIG``)

    Returns:
        Required output buffer length in bytes

    Raises:
        ValueError: If data_length is negative
    """
    cfg = resolve_config(config)
    return encoded_size(data_length) + cfg.encode_slack + cfg.safety_margin


def decode_length(
    encoded_length: int, leftover: int = 0, *, config: CodecConfig | None = None
) -> int:
    """Calculate the output capacity needed to decode ``encoded_length`` bytes.

    Args:
        encoded_length: Encoded length in bytes, marker included
        leftover: Leftover count from the tail marker; see ``tail_count``
        config: Sizing options (default: ``DEFAULT_CONFIG``)

    Returns:
        Required output buffer length in bytes

    Raises:
        ValueError: If encoded_length is negative or leftover is outside 0-6

    Example:
        >>> decode_length(8)
        24
    """
    cfg = resolve_config(config)
    return decoded_size(encoded_length, leftover) + cfg.decode_slack + cfg.safety_margin


def describe_layout(data_length: int, *, config: CodecConfig | None = None) -> EncodedLayout:
    """Break down how ``data_length`` input bytes are laid out when encoded.

    Example:
        >>> layout = describe_layout(12)
        >>> layout.groups, layout.leftover, layout.tail_lanes
        (1, 5, 3)
    """
    encoded_length = encoded_size(data_length)
    groups, leftover = divmod(data_length, GROUP_BYTES)
    return EncodedLayout(
        input_length=data_length,
        groups=groups,
        leftover=leftover,
        tail_lanes=tail_lanes(leftover),
        marker_bytes=MARKER_BYTES if leftover else 0,
        encoded_length=encoded_length,
        capacity=encode_length(data_length, config=config),
    )


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
