"""Value objects describing the encoded layout."""

from __future__ import annotations

from pydantic import Field

from ..constants import MARKER_BYTES, TAIL_MARKER, WORD_BYTES
from .base import FrozenModel


class TailMarker(FrozenModel):
    """The 2-byte ``=`` marker that closes a partial final group.

    Example:
        >>> marker = TailMarker(count=3)
        >>> marker.to_bytes()
        b'=\\x03'
        >>> marker.lanes, marker.delta
        (2, 6)
    """

    count: int = Field(ge=1, le=6, description="Leftover bytes in the final group")

    @property
    def lanes(self) -> int:
        """Code words carrying the leftover bytes."""
        return self.count // 2 + 1

    @property
    def delta(self) -> int:
        """Encoded bytes the partial group occupies, marker included."""
        return self.lanes * WORD_BYTES + MARKER_BYTES

    def to_bytes(self) -> bytes:
        return bytes((TAIL_MARKER, self.count))


class EncodedLayout(FrozenModel):
    """Size breakdown of one encoded payload."""

    input_length: int = Field(ge=0, description="Original length in bytes")
    groups: int = Field(ge=0, description="Full 7-byte groups")
    leftover: int = Field(ge=0, le=6, description="Bytes in the partial final group")
    tail_lanes: int = Field(ge=0, le=4, description="Code words for the partial group")
    marker_bytes: int = Field(ge=0, le=2, description="0 or 2")
    encoded_length: int = Field(ge=0, description="Exact encoded length in bytes")
    capacity: int = Field(ge=0, description="Buffer capacity from encode_length")

    @property
    def code_words(self) -> int:
        """Total 16-bit code words, excluding the marker."""
        return self.groups * 4 + self.tail_lanes

    @property
    def overhead_ratio(self) -> float:
        """Encoded length divided by input length (0.0 for empty input)."""
        if self.input_length == 0:
            return 0.0
        return self.encoded_length / self.input_length
