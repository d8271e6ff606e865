"""Pure types shared by the binding engine and record declarations."""

from form_binding.domain.types import (
    FieldDescriptor,
    FieldKind,
    Key,
    UInt,
    Unsigned,
)

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "Key",
    "UInt",
    "Unsigned",
]
