"""
form_binding -- Bind string-keyed form data onto typed record instances.

Callers hand a value source (dict, multi-valued dict, URL-encoded body) and
a record instance (dataclass, annotated class or SQLAlchemy model) to the
engine, which converts each field's raw strings to the declared type and
assigns them in place.

Architecture:
    adapters/  lookup only ("all values for a key")
    domain/    pure descriptor types and annotation markers
    binding/   descriptor tables, coercion, the engine
    config/    BinderConfig and its YAML loader
"""

from form_binding.adapters import FormSource, MapSource, MultiMapSource, ValueSource
from form_binding.binding import (
    Binder,
    bind_from_map,
    bind_from_multi_map,
    bind_from_source,
    bind_from_urlencoded,
)
from form_binding.config import BinderConfig, load_config
from form_binding.domain import FieldKind, Key, UInt, Unsigned
from form_binding.exceptions import (
    BindError,
    ConversionFailedError,
    NilTargetError,
    NotARecordError,
    NotAReferenceError,
    TargetError,
)

__all__ = [
    "Binder",
    "BinderConfig",
    "BindError",
    "ConversionFailedError",
    "FieldKind",
    "FormSource",
    "Key",
    "MapSource",
    "MultiMapSource",
    "NilTargetError",
    "NotARecordError",
    "NotAReferenceError",
    "TargetError",
    "UInt",
    "Unsigned",
    "ValueSource",
    "bind_from_map",
    "bind_from_multi_map",
    "bind_from_source",
    "bind_from_urlencoded",
    "load_config",
]
