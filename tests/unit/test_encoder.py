"""Unit tests for the encoder."""

from __future__ import annotations

import array

import pytest

from base16384 import CapacityError, CodecConfig, encode, encode_into, encode_length
from base16384.exceptions import Base16384Error


class TestEncode:
    """Test encode() output."""

    def test_empty(self) -> None:
        """Test that empty input encodes to nothing, without a marker."""
        assert encode(b"") == b""

    def test_single_byte(self) -> None:
        """Test one code word plus the marker."""
        encoded = encode(b"\x41")

        assert len(encoded) == 4
        assert encoded == bytes.fromhex("5e40") + b"=\x01"

    def test_full_group(self) -> None:
        """Test that exactly 7 bytes give 4 code words and no marker."""
        encoded = encode(bytes([1, 2, 3, 4, 5, 6, 7]))

        assert encoded == bytes.fromhex("4e406e305e145407")

    def test_group_and_tail(self) -> None:
        """Test a full group followed by a 2-byte tail."""
        encoded = encode(bytes(range(9)))

        assert encoded == bytes.fromhex("4e005e205a105306" "4fc24e00" "3d02")

    def test_hello(self) -> None:
        """Test a 5-byte tail (three code words)."""
        assert encode(b"hello") == bytes.fromhex("681964c67fbc3d05")

    def test_accepts_bytes_like(self) -> None:
        """Test bytearray and memoryview input."""
        data = b"\x00\x01\x02"

        assert encode(bytearray(data)) == encode(data)
        assert encode(memoryview(data)) == encode(data)

    @pytest.mark.parametrize(
        ("length", "expected"),
        [(0, 0), (1, 4), (2, 6), (3, 6), (4, 8), (5, 8), (6, 10), (7, 8), (8, 12), (14, 16)],
    )
    def test_output_length(self, length: int, expected: int) -> None:
        """Test the documented length table."""
        assert len(encode(b"\x5a" * length)) == expected

    @pytest.mark.parametrize("leftover", range(1, 7))
    def test_tail_marker(self, leftover: int) -> None:
        """Test the marker bytes for every leftover count."""
        encoded = encode(b"\xff" * (14 + leftover))

        assert encoded[-2] == 0x3D
        assert encoded[-1] == leftover


class TestEncodeInto:
    """Test encode_into() with caller-supplied buffers."""

    def test_returns_meaningful_count(self) -> None:
        """Test that the count excludes the slack."""
        out = bytearray(encode_length(7))
        written = encode_into(bytes(range(7)), out)

        assert written == 8
        assert len(out) == 32

    def test_writes_into_memoryview(self) -> None:
        """Test writing through a memoryview slice."""
        backing = bytearray(64)
        written = encode_into(b"A", memoryview(backing)[8:])

        assert backing[8 : 8 + written] == bytes.fromhex("5e403d01")
        assert backing[:8] == bytes(8)

    def test_writes_into_array(self) -> None:
        """Test writing into an array of unsigned bytes."""
        out = array.array("B", bytes(encode_length(1)))
        written = encode_into(b"A", out)

        assert out.tobytes()[:written] == bytes.fromhex("5e403d01")

    def test_capacity_error(self) -> None:
        """Test that a short buffer is rejected before writing."""
        out = bytearray(encode_length(7) - 1)

        with pytest.raises(CapacityError, match="need 32 bytes, got 31") as excinfo:
            encode_into(bytes(7), out)

        assert excinfo.value.required == 32
        assert excinfo.value.available == 31
        assert out == bytearray(31)
        assert isinstance(excinfo.value, Base16384Error)

    def test_exact_config(self, exact_config: CodecConfig) -> None:
        """Test exact-size buffers when slack is disabled."""
        out = bytearray(encode_length(5, config=exact_config))
        written = encode_into(b"hello", out, config=exact_config)

        assert written == len(out) == 8
        assert bytes(out) == bytes.fromhex("681964c67fbc3d05")

    def test_read_only_output(self) -> None:
        """Test that bytes output is rejected."""
        with pytest.raises(TypeError, match="writable"):
            encode_into(b"A", bytes(32))

    def test_aliased_buffers(self) -> None:
        """Test encoding input that lives inside the output buffer."""
        data = bytes(range(7, 21))
        buffer = bytearray(encode_length(len(data)))
        buffer[: len(data)] = data

        written = encode_into(memoryview(buffer)[: len(data)], buffer)

        assert bytes(buffer[:written]) == encode(data)
