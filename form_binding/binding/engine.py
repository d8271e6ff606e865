"""
Binding engine: fill a record instance in place from a value source.

For each declared field, in declaration order: resolve the binding key,
skip private fields, fetch the value set, then assign.

Assignment:
    - no values              -> zero value (None for optional fields)
    - sequence field         -> one converted element per value
    - scalar/optional field  -> first value; "" means zero value
The first conversion failure raises ConversionFailedError. Fields already
assigned keep their values.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from form_binding.adapters import FormSource, MapSource, MultiMapSource, ValueSource
from form_binding.binding.coercion import coerce_from_string, zero_value
from form_binding.binding.descriptors import describe, is_record_type
from form_binding.config.schema import BinderConfig
from form_binding.domain.types import FieldDescriptor
from form_binding.exceptions import (
    ConversionFailedError,
    NilTargetError,
    NotARecordError,
    NotAReferenceError,
)
from form_binding.logging_config import LogContext, get_logger

logger = get_logger("binding.engine")

# Values that are passed around by value in practice: binding cannot
# mutate them in place.
_IMMUTABLE_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    frozenset,
    range,
    Decimal,
)

_CONTAINER_TYPES: tuple[type, ...] = (list, dict, set, bytearray, Mapping, Sequence)


class Binder:
    """Stateless binding engine. Safe to share across threads."""

    def __init__(self, config: BinderConfig | None = None):
        self._config = config or BinderConfig()

    @property
    def config(self) -> BinderConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def bind_from_map(self, data: Mapping[str, str], target: Any) -> None:
        self.bind(MapSource(data), target)

    def bind_from_multi_map(self, data: Mapping[str, Sequence[str]], target: Any) -> None:
        self.bind(MultiMapSource(data), target)

    def bind_from_urlencoded(self, body: str | bytes, target: Any, encoding: str = "utf-8") -> None:
        self.bind(FormSource.from_urlencoded(body, encoding), target)

    def bind(self, source: ValueSource, target: Any) -> None:
        """
        Populate ``target`` from ``source``.

        Raises:
            NilTargetError: ``target`` is None.
            NotAReferenceError: ``target`` cannot be mutated in place.
            NotARecordError: ``target`` is not a record.
            ConversionFailedError: a value does not fit its field.
        """
        descriptors = self._describe_target(target)
        with LogContext.bind(
            record_type=type(target).__qualname__,
            source=type(source).__name__,
        ):
            logger.debug("bind_started", extra={"field_count": len(descriptors)})
            for descriptor in descriptors:
                if not descriptor.writable:
                    logger.debug("bind_field_skipped", extra={"field": descriptor.name})
                    continue
                values = source.get(descriptor.key)
                try:
                    self._assign(target, descriptor, values)
                except ConversionFailedError as exc:
                    logger.info(
                        "bind_conversion_failed",
                        extra={
                            "field": descriptor.name,
                            "key": descriptor.key,
                            "reason": exc.reason,
                        },
                    )
                    raise
            logger.debug("bind_completed")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _describe_target(self, target: Any) -> tuple[FieldDescriptor, ...]:
        if target is None:
            raise NilTargetError()
        if isinstance(target, type):
            raise NotAReferenceError(target)
        if isinstance(target, _IMMUTABLE_TYPES):
            raise NotAReferenceError(type(target))
        if dataclasses.is_dataclass(target) and type(target).__dataclass_params__.frozen:
            raise NotAReferenceError(type(target))
        if isinstance(target, _CONTAINER_TYPES):
            raise NotARecordError(type(target))

        descriptors = describe(type(target), self._config.tag)
        if not descriptors and not is_record_type(type(target)):
            raise NotARecordError(type(target))
        return descriptors

    def _assign(self, target: Any, descriptor: FieldDescriptor, values: Sequence[str]) -> None:
        if not values:
            setattr(target, descriptor.name, self._zero(descriptor))
            return

        if descriptor.is_sequence:
            converted = descriptor.container(self._convert(v, descriptor) for v in values)
            setattr(target, descriptor.name, converted)
            return

        if descriptor.optional and getattr(target, descriptor.name, None) is None:
            # allocate before converting; a failed conversion leaves the zero
            setattr(target, descriptor.name, self._element_zero(descriptor))
        setattr(target, descriptor.name, self._convert(values[0], descriptor))

    def _convert(self, raw: str, descriptor: FieldDescriptor) -> Any:
        if raw == "":
            return self._element_zero(descriptor)
        result = coerce_from_string(
            raw,
            descriptor.element_kind,
            descriptor.element_type,
            int_bits=self._config.int_bits,
        )
        if not result.success:
            raise ConversionFailedError(
                raw,
                descriptor.element_type,
                field=descriptor.name,
                key=descriptor.key,
                reason=result.reason,
            )
        return result.value

    @staticmethod
    def _element_zero(descriptor: FieldDescriptor) -> Any:
        return zero_value(descriptor.element_kind, descriptor.element_type)

    def _zero(self, descriptor: FieldDescriptor) -> Any:
        if descriptor.optional:
            return None
        if descriptor.container is not None:
            return descriptor.container()
        return self._element_zero(descriptor)


_default_binder = Binder()


def bind_from_source(source: ValueSource, target: Any) -> None:
    """Populate ``target`` from any ``ValueSource``."""
    _default_binder.bind(source, target)


def bind_from_map(data: Mapping[str, str], target: Any) -> None:
    """Populate ``target`` from a single-valued mapping."""
    _default_binder.bind_from_map(data, target)


def bind_from_multi_map(data: Mapping[str, Sequence[str]], target: Any) -> None:
    """Populate ``target`` from a multi-valued mapping."""
    _default_binder.bind_from_multi_map(data, target)


def bind_from_urlencoded(body: str | bytes, target: Any, encoding: str = "utf-8") -> None:
    """Populate ``target`` from a URL-encoded form body or query string."""
    _default_binder.bind_from_urlencoded(body, target, encoding)
