#!/usr/bin/env python3
"""Encoding into preallocated buffers.

This example demonstrates:
1. Sizing buffers with encode_length() / decode_length()
2. Reusing one buffer pair for many payloads
3. Handling CapacityError when a buffer is too small
"""

from __future__ import annotations

import os

from base16384 import (
    CapacityError,
    decode_into,
    decode_length,
    encode_into,
    encode_length,
    tail_count,
)

MAX_PAYLOAD = 1024


def main() -> None:
    """Run the buffer reuse example."""
    print("=" * 60)
    print("base16384 Buffer Reuse Example")
    print("=" * 60)
    print()

    enc_buffer = bytearray(encode_length(MAX_PAYLOAD))
    dec_buffer = bytearray(decode_length(len(enc_buffer)))
    print(f"1. Buffers: encode {len(enc_buffer)} bytes, decode {len(dec_buffer)} bytes")
    print()

    print("2. Encoding payloads of varying size...")
    for size in (1, 7, 100, 1000):
        payload = os.urandom(size)
        written = encode_into(payload, enc_buffer)
        encoded = memoryview(enc_buffer)[:written]

        needed = decode_length(written, tail_count(encoded))
        restored = decode_into(encoded, dec_buffer)
        ok = bytes(dec_buffer[:restored]) == payload
        print(f"   {size:5d} bytes -> {written:5d} encoded (decode needs {needed}) ok={ok}")
    print()

    print("3. Undersized buffer...")
    try:
        encode_into(os.urandom(64), bytearray(16))
    except CapacityError as e:
        print(f"   CapacityError: {e}")
    print()


if __name__ == "__main__":
    main()
