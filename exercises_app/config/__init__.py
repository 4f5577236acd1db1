"""Configuration defaults, YAML loading and validation."""

from .defaults import (
    AgeParams,
    DefaultConfig,
    LoggingParams,
    OutputParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "AgeParams",
    "OutputParams",
    "LoggingParams",
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
