"""
Domain Layer

Organised by bounded context:
- core/: Shared kernel with exceptions and copy helpers
- http/: Immutable HTTP requests and their builder
- document/: Document prototypes
- payment/: Payment variants and factory
"""

from .core import (
    DomainException,
    MissingRequiredFieldError,
    OutOfRangeError,
    UnsupportedVariantError,
    ValidationError,
    ValidationReason,
)
from .document import SpreadsheetDocument, TextDocument, describe_document
from .http import HttpRequest, HttpRequestBuilder
from .payment import PaymentFactory, PaymentType

__all__ = [
    # Core
    "DomainException",
    "ValidationError",
    "ValidationReason",
    "MissingRequiredFieldError",
    "OutOfRangeError",
    "UnsupportedVariantError",
    # HTTP context
    "HttpRequest",
    "HttpRequestBuilder",
    # Document context
    "TextDocument",
    "SpreadsheetDocument",
    "describe_document",
    # Payment context
    "PaymentFactory",
    "PaymentType",
]
