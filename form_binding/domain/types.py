"""
form_binding.domain.types -- Pure frozen dataclasses and markers for binding.

ZERO I/O. Describes record fields; the engine interprets them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any


class FieldKind(str, Enum):
    """Closed set of field shapes the engine knows how to fill."""

    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"
    FLOAT = "float"  # float and Decimal
    BOOL = "bool"
    TEXT = "text"
    SEQUENCE = "sequence"
    OPTIONAL = "optional"
    UNSUPPORTED = "unsupported"  # nested records, dicts, unions...


# =============================================================================
# Annotation markers
# =============================================================================


@dataclass(frozen=True)
class Key:
    """Binding key for an annotated field: ``Annotated[int, Key("page")]``."""

    name: str


class _UnsignedMarker:
    def __repr__(self) -> str:
        return "Unsigned"


#: Marks an ``int`` field as unsigned: ``Annotated[int, Unsigned]``.
Unsigned = _UnsignedMarker()

UInt = Annotated[int, Unsigned]


# =============================================================================
# Field descriptor
# =============================================================================


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Everything the engine needs to fill one field, derived once per type.

    ``kind`` is SEQUENCE for sequence fields (optional or not), OPTIONAL for
    optional scalars and the scalar kind otherwise. ``element_kind`` is
    always the scalar kind of a single converted value.
    """

    name: str  # attribute name on the record
    key: str  # lookup key in the source
    kind: FieldKind
    element_kind: FieldKind
    element_type: Any  # python type each value is converted to
    declared_type: Any
    optional: bool = False
    container: type | None = None  # list or tuple for sequence fields
    writable: bool = True

    @property
    def is_sequence(self) -> bool:
        return self.kind == FieldKind.SEQUENCE
