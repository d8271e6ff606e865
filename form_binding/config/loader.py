"""
Configuration loader (``form_binding.config.loader``).

Loads a YAML file and parses it into a ``BinderConfig``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown keys or invalid values  -> ``ValueError``.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from form_binding.config.schema import BinderConfig

_KNOWN_KEYS = frozenset(f.name for f in fields(BinderConfig))


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return data


def parse_config(data: dict[str, Any]) -> BinderConfig:
    """Parse a ``BinderConfig`` from a dict. Missing keys take defaults."""
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown binder config keys: {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    if "tag" in data:
        kwargs["tag"] = data["tag"]
    if "int_bits" in data:
        bits = data["int_bits"]
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise ValueError(f"int_bits must be an integer, got {bits!r}")
        kwargs["int_bits"] = bits
    return BinderConfig(**kwargs)


def load_config(path: Path | str) -> BinderConfig:
    """Load and validate a binder configuration file."""
    return parse_config(load_yaml_file(Path(path)))
