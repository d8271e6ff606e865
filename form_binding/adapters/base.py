"""
Value source protocol.

Contract:
    ValueSource.get(key) returns the ordered list of raw strings stored
    under ``key``. An empty list means the key is absent; ``[""]`` means
    present but empty.

Adapters perform lookup only. Type conversion belongs to the binding engine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ValueSource(Protocol):
    """Protocol for anything that can answer "all values for this key"."""

    def get(self, key: str) -> list[str]:
        """Return every value for ``key`` in source order (possibly empty)."""
        ...
