"""Binder configuration: frozen settings plus a YAML loader."""

from form_binding.config.loader import load_config, load_yaml_file, parse_config
from form_binding.config.schema import BinderConfig

__all__ = [
    "BinderConfig",
    "load_config",
    "load_yaml_file",
    "parse_config",
]
