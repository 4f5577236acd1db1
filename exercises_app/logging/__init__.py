"""
Logging configuration and utilities for the exercises.
"""
from .config import (
    configure_library_defaults,
    configure_logging,
    get_logger,
    get_output_logger,
)

__all__ = [
    "configure_library_defaults",
    "configure_logging",
    "get_logger",
    "get_output_logger",
]
