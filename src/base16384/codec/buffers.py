"""Output buffer checks shared by the encoder and decoder."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def writable_view(output: object) -> memoryview:
    """Return a flat, writable byte view of ``output``.

    Raises:
        TypeError: If output does not support the buffer protocol or is read-only
    """
    view = memoryview(output)  # type: ignore[arg-type]
    if view.readonly:
        raise TypeError(f"Output buffer must be writable, got read-only {type(output).__name__}")
    if view.ndim != 1 or view.itemsize != 1:
        view = view.cast("B")
    return view
