"""Wire-format constants shared by the codec and the size calculators."""

from __future__ import annotations

GROUP_BYTES = 7  # input bytes per full group
GROUP_WORDS = 4  # code words per full group
WORD_BYTES = 2
ENCODED_GROUP_BYTES = GROUP_WORDS * WORD_BYTES

BASE = 0x4E00  # first code word of the safe band

TAIL_MARKER = 0x3D  # ASCII "="
MARKER_BYTES = 2
MAX_LEFTOVER = GROUP_BYTES - 1

# Encoded bytes for a partial group of r leftover bytes, marker included.
TAIL_DELTA = (0, 4, 6, 6, 8, 8, 10)
