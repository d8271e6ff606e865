"""Binding engine: descriptor tables, scalar coercion and field assignment."""

from form_binding.binding.coercion import CoercionResult, coerce_from_string, zero_value
from form_binding.binding.descriptors import clear_descriptor_cache, describe, describe_field
from form_binding.binding.engine import (
    Binder,
    bind_from_map,
    bind_from_multi_map,
    bind_from_source,
    bind_from_urlencoded,
)

__all__ = [
    "Binder",
    "bind_from_map",
    "bind_from_multi_map",
    "bind_from_source",
    "bind_from_urlencoded",
    "describe",
    "describe_field",
    "clear_descriptor_cache",
    "coerce_from_string",
    "zero_value",
    "CoercionResult",
]
