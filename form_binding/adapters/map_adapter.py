"""Dict-backed value sources (single-valued and multi-valued)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence


class MapSource:
    """Single-valued mapping: each key has at most one value."""

    def __init__(self, data: Mapping[str, str]):
        self._data = data

    def get(self, key: str) -> list[str]:
        if key in self._data:
            return [self._data[key]]
        return []

    def __repr__(self) -> str:
        return f"MapSource({len(self._data)} keys)"


class MultiMapSource:
    """Multi-valued mapping: each key may carry several ordered values."""

    def __init__(self, data: Mapping[str, Sequence[str]]):
        self._data = data

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "MultiMapSource":
        """Group ``(key, value)`` pairs, keeping key and value order."""
        grouped: dict[str, list[str]] = {}
        for key, value in pairs:
            grouped.setdefault(key, []).append(value)
        return cls(grouped)

    def get(self, key: str) -> list[str]:
        return list(self._data.get(key, ()))

    def keys(self) -> list[str]:
        return list(self._data)

    def __repr__(self) -> str:
        return f"MultiMapSource({len(self._data)} keys)"
