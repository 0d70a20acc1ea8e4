"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    CrossReferenceSettings,
    ExampleSettings,
    MarkupLanguage,
    MarkupSettings,
    RenderingSettings,
)

__all__ = [
    "CrossReferenceSettings",
    "ExampleSettings",
    "MarkupLanguage",
    "MarkupSettings",
    "RenderingSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
