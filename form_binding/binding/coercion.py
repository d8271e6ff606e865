"""
Scalar coercion: pure string-to-typed conversion per FieldKind.

Form and query sources produce strings only; this converts one raw string
to int, float, Decimal, bool or str. ZERO I/O. The grammar is strict:
no surrounding whitespace and no digit-group underscores, which Python's
own ``int()``/``float()`` would otherwise accept.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from form_binding.domain.types import FieldKind


# -----------------------------------------------------------------------------
# Result type
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CoercionResult:
    """Result of coercing a string to a target kind."""

    success: bool
    value: Any = None
    reason: str | None = None


def _failed(reason: str) -> CoercionResult:
    return CoercionResult(success=False, reason=reason)


# -----------------------------------------------------------------------------
# Grammars
# -----------------------------------------------------------------------------

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INFINITY_RE = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)

_TRUE_LITERALS = frozenset({"1", "t", "true"})
_FALSE_LITERALS = frozenset({"0", "f", "false"})


# -----------------------------------------------------------------------------
# Per-kind parsers (raise ValueError)
# -----------------------------------------------------------------------------


def parse_signed(value: str, bits: int = 64) -> int:
    """Parse a base-10 signed integer within a two's-complement width."""
    if not _SIGNED_RE.fullmatch(value):
        raise ValueError(f"invalid signed integer literal: {value!r}")
    n = int(value, 10)
    bound = 1 << (bits - 1)
    if not -bound <= n < bound:
        raise ValueError(f"{value!r} out of range for {bits}-bit signed integer")
    return n


def parse_unsigned(value: str, bits: int = 64) -> int:
    """Parse a base-10 unsigned integer. A sign prefix is not permitted."""
    if not _UNSIGNED_RE.fullmatch(value):
        raise ValueError(f"invalid unsigned integer literal: {value!r}")
    n = int(value, 10)
    if n >= 1 << bits:
        raise ValueError(f"{value!r} out of range for {bits}-bit unsigned integer")
    return n


def parse_float(value: str, to: type = float) -> float | Decimal:
    """Parse a decimal floating point literal into ``float`` or ``Decimal``."""
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError(f"invalid floating point literal: {value!r}")
    if to is Decimal:
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal literal: {value!r}") from exc
    f = float(value)
    if math.isinf(f) and not _INFINITY_RE.fullmatch(value):
        raise ValueError(f"{value!r} out of range for float")
    return f


def parse_bool(value: str) -> bool:
    """Parse true/false/t/f/1/0, case-insensitive."""
    low = value.lower()
    if low in _TRUE_LITERALS:
        return True
    if low in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {value!r}")


# -----------------------------------------------------------------------------
# Coercion entry points
# -----------------------------------------------------------------------------


def zero_value(kind: FieldKind, python_type: Any = None) -> Any:
    """Zero value of a scalar kind. Unsupported kinds have no zero: None."""
    if kind in (FieldKind.SIGNED_INT, FieldKind.UNSIGNED_INT):
        return 0
    if kind == FieldKind.FLOAT:
        return Decimal(0) if python_type is Decimal else 0.0
    if kind == FieldKind.BOOL:
        return False
    if kind == FieldKind.TEXT:
        return ""
    return None


def coerce_from_string(
    value: str,
    kind: FieldKind,
    python_type: Any = None,
    *,
    int_bits: int = 64,
) -> CoercionResult:
    """
    Coerce a non-empty string to the given scalar kind. Pure function.

    The empty string is not special-cased here; callers decide whether it
    means "zero value".
    """
    try:
        if kind == FieldKind.TEXT:
            return CoercionResult(success=True, value=value)
        if kind == FieldKind.SIGNED_INT:
            return CoercionResult(success=True, value=parse_signed(value, int_bits))
        if kind == FieldKind.UNSIGNED_INT:
            return CoercionResult(success=True, value=parse_unsigned(value, int_bits))
        if kind == FieldKind.FLOAT:
            to = Decimal if python_type is Decimal else float
            return CoercionResult(success=True, value=parse_float(value, to))
        if kind == FieldKind.BOOL:
            return CoercionResult(success=True, value=parse_bool(value))
    except ValueError as exc:
        return _failed(str(exc))

    return _failed(f"no conversion rule for {kind.value} field")
