"""Translate exceptions into uniform error responses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from patterncraft.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    ValidationError,
)
from patterncraft.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ErrorCategory(str, Enum):
    """Broad error categories."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    DOMAIN = "domain"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Error codes used when an exception carries none of its own."""

    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class ErrorResponse:
    error_code: str
    message: str
    category: ErrorCategory
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "details": dict(self.details),
        }


class ExceptionHandler:
    """Maps exceptions to ErrorResponse objects and logs them."""

    def handle(self, error: Exception) -> ErrorResponse:
        if isinstance(error, ValidationError):
            category = ErrorCategory.VALIDATION
        elif isinstance(error, ConfigurationError):
            category = ErrorCategory.CONFIGURATION
        elif isinstance(error, DomainException):
            category = ErrorCategory.DOMAIN
        else:
            logger.error("Unhandled exception", error=str(error), exc_info=error)
            return ErrorResponse(
                ErrorCode.INTERNAL_ERROR.value,
                str(error) or type(error).__name__,
                ErrorCategory.INTERNAL,
                {"exception_type": type(error).__name__},
            )

        logger.warning(
            "Domain error",
            error_code=error.error_code,
            category=category.value,
            error=error.message,
        )
        return ErrorResponse(error.error_code, error.message, category, dict(error.details))


_exception_handler: Optional[ExceptionHandler] = None


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler."""
    global _exception_handler
    if _exception_handler is None:
        _exception_handler = ExceptionHandler()
    return _exception_handler
