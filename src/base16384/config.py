"""Configuration for buffer sizing and decoding strictness.

The codec itself is stateless; this dataclass only tunes how much slack the
length calculators add and how forgiving the decoder is about truncated input.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Sizing and validation options shared by encoder, decoder and calculators.

    Attributes:
        encode_slack: Trailing bytes added to encode buffers (default 8).
            Covers one full 64-bit store past the logical end.

        decode_slack: Trailing bytes added to decode buffers (default 1).

        safety_margin: Extra bytes added to both calculators (default 16).

        strict: Reject encoded bodies that are not whole 8-byte groups
            (default True). When False the partial group is ignored, which is
            what the reference decoder does.

    Examples:
        ```python
        from base16384 import CodecConfig, encode_into, encode_length

        # Exact-size buffers, no slack at all
        exact = CodecConfig(encode_slack=0, decode_slack=0, safety_margin=0)
        out = bytearray(encode_length(5, config=exact))
        written = encode_into(b"hello", out, config=exact)
        assert written == len(out)
        ```
    """

    encode_slack: int = 8
    decode_slack: int = 1
    safety_margin: int = 16

    strict: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.encode_slack < 0:
            raise ValueError(f"encode_slack must be >= 0, got {self.encode_slack}")

        if self.decode_slack < 0:
            raise ValueError(f"decode_slack must be >= 0, got {self.decode_slack}")

        if self.safety_margin < 0:
            raise ValueError(f"safety_margin must be >= 0, got {self.safety_margin}")


DEFAULT_CONFIG = CodecConfig()


def resolve_config(config: CodecConfig | None) -> CodecConfig:
    """Return ``config`` or the shared default."""
    return DEFAULT_CONFIG if config is None else config
