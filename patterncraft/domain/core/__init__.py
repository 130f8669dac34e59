"""Shared kernel: exceptions used by every bounded context."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    MissingRequiredFieldError,
    OutOfRangeError,
    UnsupportedVariantError,
    ValidationError,
    ValidationReason,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ValidationReason",
    "MissingRequiredFieldError",
    "OutOfRangeError",
    "UnsupportedVariantError",
    "ConfigurationError",
]
