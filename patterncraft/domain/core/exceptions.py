# patterncraft/domain/core/exceptions.py
from enum import Enum
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationReason(str, Enum):
    """Why a value failed validation."""

    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    OUT_OF_RANGE = "OutOfRange"
    UNSUPPORTED_VARIANT = "UnsupportedVariant"


class ValidationError(DomainException):
    """Raised when domain validation fails."""

    def __init__(
        self,
        message: str,
        reason: ValidationReason,
        field_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = {"reason": reason.value, "field": field_name}
        merged.update(details or {})
        super().__init__(message, "VALIDATION_ERROR", merged)
        self.reason = reason
        self.field_name = field_name


class MissingRequiredFieldError(ValidationError):
    """Raised when a required field was never set."""

    def __init__(self, field_name: str):
        super().__init__(
            f"{field_name} cannot be None",
            ValidationReason.MISSING_REQUIRED_FIELD,
            field_name,
        )


class OutOfRangeError(ValidationError):
    """Raised when a numeric field violates its bound."""

    def __init__(self, field_name: str, value: Any, constraint: str):
        super().__init__(
            f"{field_name} must be {constraint}, got {value}",
            ValidationReason.OUT_OF_RANGE,
            field_name,
            {"value": value, "constraint": constraint},
        )
        self.value = value
        self.constraint = constraint


class UnsupportedVariantError(ValidationError):
    """Raised when a variant outside a closed set is requested."""

    def __init__(self, kind: str, value: Any):
        super().__init__(
            f"Unknown {kind}: {value}",
            ValidationReason.UNSUPPORTED_VARIANT,
            kind,
            {"value": str(value)},
        )
        self.value = value


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)
