"""
Module: form_binding.binding.descriptors
Responsibility: Turn a record class into an ordered, immutable table of
    FieldDescriptor entries (binding key, kind, writability).
Architecture position: Binding > descriptors. Depends on domain types and
    SQLAlchemy's inspection API only; never touches record instances.

Supported record declarations:
    - dataclasses: order of ``dataclasses.fields``; key from
      ``field(metadata={tag: ...})``.
    - plain annotated classes: order of ``typing.get_type_hints`` (base
      classes first); key from ``Annotated[..., Key(...)]``.
    - SQLAlchemy mapped classes: order of ``Mapper.column_attrs``; key from
      ``mapped_column(info={tag: ...})``; nullable columns are optional.
      ``column_property`` expressions are not fields.

Invariants enforced:
    - Attributes whose name starts with ``_`` are described but not writable.
    - ``ClassVar`` annotations are not fields.
    - Descriptor tables are built once per (record type, tag) and never
      mutated afterwards. The cache is safe for concurrent readers.
"""

from __future__ import annotations

import dataclasses
import threading
import types
from collections.abc import MutableSequence, Sequence
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin, get_type_hints

from sqlalchemy import Column
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Mapper
from sqlalchemy.types import ARRAY

from form_binding.domain.types import FieldDescriptor, FieldKind, Key, Unsigned

_SCALAR_KINDS: dict[Any, FieldKind] = {
    bool: FieldKind.BOOL,
    int: FieldKind.SIGNED_INT,
    float: FieldKind.FLOAT,
    Decimal: FieldKind.FLOAT,
    str: FieldKind.TEXT,
}

_SEQUENCE_CONTAINERS: dict[Any, type] = {
    list: list,
    tuple: tuple,
    Sequence: list,
    MutableSequence: list,
}


# -----------------------------------------------------------------------------
# Annotation helpers
# -----------------------------------------------------------------------------


def _split_annotated(tp: Any) -> tuple[Any, tuple[Any, ...]]:
    meta: tuple[Any, ...] = ()
    while get_origin(tp) is Annotated:
        meta += tp.__metadata__
        tp = tp.__origin__
    return tp, meta


def _optional_inner(tp: Any) -> Any | None:
    """Return ``T`` for ``T | None``; None for anything else."""
    if get_origin(tp) not in (Union, types.UnionType):
        return None
    args = get_args(tp)
    non_none = [a for a in args if a is not type(None)]
    if len(non_none) == 1 and len(args) == 2:
        return non_none[0]
    return None


def _is_class_var(tp: Any) -> bool:
    return tp is ClassVar or get_origin(tp) is ClassVar


def _scalar_kind(tp: Any, meta: tuple[Any, ...]) -> tuple[FieldKind, Any]:
    tp, more = _split_annotated(tp)
    meta += more
    try:
        kind = _SCALAR_KINDS.get(tp, FieldKind.UNSUPPORTED)
    except TypeError:
        # unhashable annotation objects
        kind = FieldKind.UNSUPPORTED
    if kind == FieldKind.SIGNED_INT and any(m is Unsigned for m in meta):
        kind = FieldKind.UNSIGNED_INT
    return kind, tp


def _sequence_parts(tp: Any) -> tuple[type, Any] | None:
    """Return (container, element annotation) for homogeneous sequences."""
    if tp in (list, tuple):
        return tp, Any
    origin = get_origin(tp)
    try:
        container = _SEQUENCE_CONTAINERS.get(origin)
    except TypeError:
        return None
    if container is None:
        return None
    args = get_args(tp)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return container, args[0]
        return None
    return container, args[0] if args else Any


def describe_field(name: str, annotation: Any, key: str | None = None) -> FieldDescriptor:
    """Build the descriptor for one declared field."""
    tp, meta = _split_annotated(annotation)

    inner = _optional_inner(tp)
    optional = inner is not None
    if optional:
        tp, more = _split_annotated(inner)
        meta += more

    for m in meta:
        if isinstance(m, Key):
            key = m.name

    sequence = _sequence_parts(tp)
    if sequence is not None:
        container, element = sequence
        element_kind, element_type = _scalar_kind(element, meta)
        kind = FieldKind.SEQUENCE
    else:
        container = None
        element_kind, element_type = _scalar_kind(tp, meta)
        kind = FieldKind.OPTIONAL if optional else element_kind

    return FieldDescriptor(
        name=name,
        key=key if key is not None else name,
        kind=kind,
        element_kind=element_kind,
        element_type=element_type,
        declared_type=annotation,
        optional=optional,
        container=container,
        writable=not name.startswith("_"),
    )


# -----------------------------------------------------------------------------
# Record introspection
# -----------------------------------------------------------------------------


def _column_annotation(column: Any) -> Any:
    """Synthesize a Python annotation equivalent to a mapped column."""
    column_type = column.type
    try:
        if isinstance(column_type, ARRAY):
            annotation: Any = list[column_type.item_type.python_type]
        else:
            annotation = column_type.python_type
    except NotImplementedError:
        annotation = object
    if column.nullable:
        annotation = annotation | None
    return annotation


def _describe_mapped(mapper: Mapper, tag: str) -> list[FieldDescriptor]:
    descriptors = []
    for prop in mapper.column_attrs:
        column = prop.columns[0]
        if not isinstance(column, Column):
            # column_property expressions are read-only
            continue
        descriptors.append(
            describe_field(prop.key, _column_annotation(column), column.info.get(tag))
        )
    return descriptors


def _describe_dataclass(record_type: type, tag: str) -> list[FieldDescriptor]:
    hints = get_type_hints(record_type, include_extras=True)
    return [
        describe_field(f.name, hints.get(f.name, f.type), f.metadata.get(tag))
        for f in dataclasses.fields(record_type)
    ]


def _describe_annotated(record_type: type) -> list[FieldDescriptor]:
    hints = get_type_hints(record_type, include_extras=True)
    return [
        describe_field(name, annotation)
        for name, annotation in hints.items()
        if not _is_class_var(annotation)
    ]


def is_record_type(record_type: type) -> bool:
    """True for dataclasses and mapped classes, even when they declare no fields."""
    if dataclasses.is_dataclass(record_type):
        return True
    return isinstance(sa_inspect(record_type, raiseerr=False), Mapper)


def _build(record_type: type, tag: str) -> tuple[FieldDescriptor, ...]:
    mapper = sa_inspect(record_type, raiseerr=False)
    if isinstance(mapper, Mapper):
        return tuple(_describe_mapped(mapper, tag))
    if dataclasses.is_dataclass(record_type):
        return tuple(_describe_dataclass(record_type, tag))
    return tuple(_describe_annotated(record_type))


_cache: dict[tuple[type, str], tuple[FieldDescriptor, ...]] = {}
_cache_lock = threading.Lock()


def describe(record_type: type, tag: str = "bind") -> tuple[FieldDescriptor, ...]:
    """Return the cached descriptor table for ``record_type``."""
    cache_key = (record_type, tag)
    table = _cache.get(cache_key)
    if table is not None:
        return table
    table = _build(record_type, tag)
    with _cache_lock:
        return _cache.setdefault(cache_key, table)


def clear_descriptor_cache() -> None:
    """Drop all cached tables. FOR TESTING ONLY."""
    with _cache_lock:
        _cache.clear()
