"""Value sources for binding (lookup only, no conversion)."""

from form_binding.adapters.base import ValueSource
from form_binding.adapters.form_adapter import FormSource
from form_binding.adapters.map_adapter import MapSource, MultiMapSource

__all__ = [
    "ValueSource",
    "MapSource",
    "MultiMapSource",
    "FormSource",
]
