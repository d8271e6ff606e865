"""
Typed exception hierarchy for form binding.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    BindError (base)
    |
    +-- TargetError
    |   +-- NotAReferenceError
    |   +-- NilTargetError
    |   +-- NotARecordError
    |
    +-- ConversionFailedError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                | When Raised
----------------|---------------------|-------------------------------------------
Target          | NOT_A_REFERENCE     | Destination is an immutable value or a class
                | NIL_TARGET          | Destination is None
                | NOT_A_RECORD        | Destination is not a record (list, dict...)
----------------|---------------------|-------------------------------------------
Conversion      | CONVERSION_FAILED   | Source string cannot become the field type

===============================================================================
HANDLING PATTERNS
===============================================================================

Target errors point at a broken call site. Conversion errors point at bad
input and usually map to an HTTP 400:

    try:
        bind_from_urlencoded(body, form)
    except ConversionFailedError as e:
        return {"error": e.code, "field": e.key, "value": e.value}

A failed bind leaves the destination partially populated. Fields processed
before the failing one keep their new values.
"""

from __future__ import annotations

from typing import Any


class BindError(Exception):
    """
    Base exception for all binding errors.

    All subclasses carry a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "BIND_ERROR"


# Destination errors


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


class TargetError(BindError):
    """Base exception for an unusable destination argument."""

    code: str = "INVALID_TARGET"

    default_message: str = "invalid target"

    def __init__(self, target_type: type | None = None):
        self.target_type = target_type
        message = self.default_message
        if target_type is not None:
            message = f"{message}: got {_type_name(target_type)}"
        super().__init__(message)


class NotAReferenceError(TargetError):
    """Destination cannot be mutated in place."""

    code: str = "NOT_A_REFERENCE"

    default_message = "target must be a mutable record instance"


class NilTargetError(TargetError):
    """Destination is None."""

    code: str = "NIL_TARGET"

    default_message = "target is nil"

    def __init__(self) -> None:
        super().__init__(None)


class NotARecordError(TargetError):
    """Destination is mutable but is not a record."""

    code: str = "NOT_A_RECORD"

    default_message = "target must be a record"


# Conversion errors


class ConversionFailedError(BindError, ValueError):
    """A source string could not be converted into the field's type."""

    code: str = "CONVERSION_FAILED"

    def __init__(
        self,
        value: str,
        to: Any,
        field: str | None = None,
        key: str | None = None,
        reason: str | None = None,
    ):
        self.value = value
        self.to = to
        self.field = field
        self.key = key
        self.reason = reason
        super().__init__(f"cannot convert {value!r} to {_type_name(to)}")
