# patterncraft/domain/document/documents.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple, Union

from typing_extensions import assert_never

from patterncraft.domain.core.copying import frozen_sequence, frozen_table, thawed_table
from patterncraft.domain.core.exceptions import OutOfRangeError, UnsupportedVariantError


class DocumentKind(str, Enum):
    """Closed set of document variants."""

    TEXT = "text"
    SPREADSHEET = "spreadsheet"


@dataclass(frozen=True)
class TextDocument:
    """Text document prototype. ``tags`` is kept as a private tuple copy."""

    title: str
    content: str
    author: str
    tags: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tags", frozen_sequence(self.tags))

    @property
    def kind(self) -> DocumentKind:
        return DocumentKind.TEXT

    def clone(self) -> TextDocument:
        return TextDocument(self.title, self.content, self.author, list(self.tags))

    def get_content(self) -> str:
        return self.content

    def with_content(self, content: str) -> TextDocument:
        return TextDocument(self.title, content, self.author, list(self.tags))

    def with_tags(self, tags: Iterable[str]) -> TextDocument:
        return TextDocument(self.title, self.content, self.author, tags)


@dataclass(frozen=True)
class SpreadsheetDocument:
    """Spreadsheet prototype holding a row-major table of cells.

    ``data`` is deep-copied on every construction path into a tuple of
    tuples, so neither the source table nor any of its rows are shared.
    """

    name: str
    data: Tuple[Tuple[str, ...], ...]
    rows: int
    columns: int

    def __post_init__(self):
        if self.rows < 0:
            raise OutOfRangeError("rows", self.rows, ">= 0")
        if self.columns < 0:
            raise OutOfRangeError("columns", self.columns, ">= 0")
        object.__setattr__(self, "data", frozen_table(self.data))

    @property
    def kind(self) -> DocumentKind:
        return DocumentKind.SPREADSHEET

    def clone(self) -> SpreadsheetDocument:
        return SpreadsheetDocument(self.name, thawed_table(self.data), self.rows, self.columns)

    def get_content(self) -> str:
        return str(thawed_table(self.data))

    def cell(self, row: int, column: int) -> str:
        self._check_bounds(row, column)
        return self.data[row][column]

    def with_name(self, name: str) -> SpreadsheetDocument:
        return SpreadsheetDocument(name, thawed_table(self.data), self.rows, self.columns)

    def with_cell(self, row: int, column: int, value: str) -> SpreadsheetDocument:
        """Return a copy with a single cell replaced."""
        self._check_bounds(row, column)
        table = thawed_table(self.data)
        table[row][column] = value
        return SpreadsheetDocument(self.name, table, self.rows, self.columns)

    def _check_bounds(self, row: int, column: int) -> None:
        if not 0 <= row < len(self.data):
            raise OutOfRangeError("row", row, f"between 0 and {len(self.data) - 1}")
        width = len(self.data[row])
        if not 0 <= column < width:
            raise OutOfRangeError("column", column, f"between 0 and {width - 1}")


Document = Union[TextDocument, SpreadsheetDocument]


def create_spreadsheet(name: str, data: Sequence[Sequence[str]]) -> SpreadsheetDocument:
    """Create a spreadsheet sized from its data."""
    columns = max((len(row) for row in data), default=0)
    return SpreadsheetDocument(name, [list(row) for row in data], len(data), columns)


def describe_document(document: Document) -> str:
    """Summarise any document variant in one line."""
    if not isinstance(document, (TextDocument, SpreadsheetDocument)):
        raise UnsupportedVariantError("document", type(document).__name__)

    if isinstance(document, TextDocument):
        return (
            f"Text document '{document.title}' by {document.author} "
            f"({len(document.tags)} tags)"
        )
    elif isinstance(document, SpreadsheetDocument):
        return f"Spreadsheet '{document.name}' ({document.rows}x{document.columns})"
    else:
        assert_never(document)
