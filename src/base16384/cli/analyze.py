"""Layout analysis CLI command."""

from __future__ import annotations

from ..models.layout import EncodedLayout
from ..utils.sizing import describe_layout


def analyze_length(data_length: int) -> None:
    """Print how ``data_length`` input bytes are laid out when encoded.

    Args:
        data_length: Input length in bytes
    """
    layout = describe_layout(data_length)

    print("|" * 7, "base16384: Base16384 Codec", "|" * 7)
    print(f"Input length: {layout.input_length} bytes")
    print("Sizes are in bytes unless otherwise noted.")
    print()
    print_layout(layout)


def print_layout(layout: EncodedLayout) -> None:
    """Print a detailed breakdown of one layout.

    Args:
        layout: Layout to print
    """
    print(f"{'-' * 28} Body {'-' * 28}")
    print(_row("full 7-byte groups", layout.groups))
    print(_row("code words", layout.groups * 4))
    print(_row("encoded body", layout.groups * 8))
    print()

    print(f"{'-' * 28} Tail {'-' * 28}")
    if layout.leftover:
        print(_row("leftover bytes", layout.leftover))
        print(_row("tail code words", layout.tail_lanes))
        print(_row("marker", layout.marker_bytes))
    else:
        print("        (none)")
    print()

    print(f"{'=' * 26} Summary {'=' * 26}")
    print(_row("encoded length", layout.encoded_length))
    print(_row("buffer capacity (encode_length)", layout.capacity))
    print(_row("text characters", layout.encoded_length // 2))

    if layout.input_length:
        # Base64 needs 4 characters per 3 bytes
        base64_chars = -(-layout.input_length // 3) * 4
        print(f"Expansion: {layout.overhead_ratio:.3f}x")
        print(f"Characters vs Base64: {layout.encoded_length // 2} / {base64_chars}")
    print()


def _row(label: str, value: int) -> str:
    dots = "." * max(1, 48 - len(label) - len(str(value)))
    return f"        {label}{dots}{value}"
