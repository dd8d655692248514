"""Base model and shared Pydantic configuration.

Descriptive values handed back to callers (tail markers, layouts) are
immutable Pydantic models validated on construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Base class for immutable base16384 value objects."""

    model_config = ConfigDict(
        # Values are computed, never edited
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
