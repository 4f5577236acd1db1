"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures outside the exercises themselves:
an unusable configuration or an output stream that cannot be written.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Configuration file could not be read or failed validation."""

    def __init__(self, message: str, source: Optional[str] = None,
                 errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.errors = errors or []


class DeliveryError(SystemFailureError):
    """Output stream failures."""

    def __init__(self, message: str, delivery_method: Optional[str] = None,
                 line: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.delivery_method = delivery_method
        self.line = line
