#!/usr/bin/env python3
"""Basic usage example for base16384.

This example demonstrates:
1. Encoding binary data to Base16384
2. Inspecting the text form and the tail marker
3. Decoding back to the original bytes
4. Comparing sizes with Base64
"""

from __future__ import annotations

import base64

from base16384 import decode, describe_layout, encode, tail_count


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("base16384 Basic Usage Example")
    print("=" * 60)
    print()

    payload = b"Base16384 packs 7 bytes into 4 code words."

    # Encode
    print("1. Encoding a payload...")
    encoded = encode(payload)
    print(f"   Input: {len(payload)} bytes")
    print(f"   Encoded: {len(encoded)} bytes ({len(encoded) // 2} UTF-16 characters)")
    print()

    # Text form
    print("2. Text form (UTF-16BE)...")
    text = encoded.decode("utf-16-be")
    print(f"   {text}")
    print(f"   Tail marker announces {tail_count(encoded)} leftover bytes")
    print()

    # Decode
    print("3. Decoding...")
    decoded = decode(text.encode("utf-16-be"))
    print(f"   Round trip OK: {decoded == payload}")
    print()

    # Layout and comparison
    print("4. Size comparison...")
    layout = describe_layout(len(payload))
    b64 = base64.b64encode(payload)
    print(f"   Groups: {layout.groups}, leftover: {layout.leftover}")
    print(f"   Base16384 characters: {len(text)}")
    print(f"   Base64 characters:    {len(b64)}")
    print()


if __name__ == "__main__":
    main()
