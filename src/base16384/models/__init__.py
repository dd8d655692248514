"""Pydantic value objects for base16384."""

from __future__ import annotations

from .base import FrozenModel
from .layout import EncodedLayout, TailMarker

__all__ = [
    "FrozenModel",
    "EncodedLayout",
    "TailMarker",
]
