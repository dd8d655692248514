"""Exception hierarchy for base16384.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Base16384Error for easy catching of any codec error.
Every error is deterministic for a given input and is raised before any byte of
output is written.
"""

from __future__ import annotations


class Base16384Error(Exception):
    """Base exception for all base16384 errors."""

    pass


class DecodeError(Base16384Error):
    """Raised when decoding Base16384 data fails.

    Examples:
        - Odd number of bytes (not a sequence of 16-bit code words)
        - Tail marker announcing an impossible leftover count
        - Body that does not consist of whole 4-word groups
    """

    pass


class CapacityError(Base16384Error):
    """Raised when a caller-supplied output buffer is too small.

    Attributes:
        required: Capacity the operation needs, in bytes
        available: Capacity of the buffer that was supplied, in bytes
    """

    def __init__(self, required: int, available: int, operation: str = "encode") -> None:
        self.required = required
        self.available = available
        self.operation = operation
        super().__init__(
            f"Output buffer too small to {operation}: need {required} bytes, got {available}"
        )


class MalformedTailError(DecodeError):
    """Raised when the trailing ``=`` marker is invalid.

    Examples:
        - Leftover count byte outside 1-6
        - Marker present without enough preceding code words
    """

    pass


class InvalidInputLengthError(DecodeError):
    """Raised when encoded input has an impossible length.

    Examples:
        - Odd length (code words are 2 bytes each)
        - Body not a multiple of 8 bytes in strict mode
    """

    pass
