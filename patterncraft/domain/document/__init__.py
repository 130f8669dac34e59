"""Document bounded context: prototypes that copy and derive."""

from .documents import (
    Document,
    DocumentKind,
    SpreadsheetDocument,
    TextDocument,
    create_spreadsheet,
    describe_document,
)

__all__ = [
    "Document",
    "DocumentKind",
    "TextDocument",
    "SpreadsheetDocument",
    "create_spreadsheet",
    "describe_document",
]
