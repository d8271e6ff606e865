"""
Binder configuration schema.

Parsed from YAML by ``form_binding.config.loader``; consumed by
``form_binding.binding.engine.Binder``.
"""

from __future__ import annotations

from dataclasses import dataclass

SUPPORTED_INT_BITS: frozenset[int] = frozenset({8, 16, 32, 64})


@dataclass(frozen=True)
class BinderConfig:
    """Engine settings shared by every bind call of one Binder."""

    # Name of the dataclass metadata / SQLAlchemy column.info entry that
    # holds a field's binding key.
    tag: str = "bind"
    # Integer fields are range-checked against this width.
    int_bits: int = 64

    def __post_init__(self) -> None:
        if not isinstance(self.tag, str) or not self.tag:
            raise ValueError(f"tag must be a non-empty string, got {self.tag!r}")
        if self.int_bits not in SUPPORTED_INT_BITS:
            raise ValueError(
                f"int_bits must be one of {sorted(SUPPORTED_INT_BITS)}, got {self.int_bits!r}"
            )

