"""
rowval: Python library for parsing delimited rows and structured values.

Public API surface:

- ``parse_line(text, delimiter=",")`` -- one line -> list of trimmed fields.
- ``parse_document(text, delimiter=",")`` -- multi-line text -> list of
  rows, blank lines skipped.
- ``parse_value(text, max_depth=64)`` -- ``(Value, remainder)`` for the
  value at the start of *text*.
- ``parse_complete_value(text, max_depth=64)`` -- exactly one value,
  nothing but whitespace after it.
- ``read_document(path, config)`` / ``read_value(path, config)`` -- the
  same, reading the text from a file.

For repeated parsing with one configuration, build a ``RowParser`` or
``ValueParser`` once (directly or via ``from_config``) and reuse it; both
are stateless between calls.
"""

from __future__ import annotations

from rowval.config import ParserConfig, load_config, save_config
from rowval.exceptions import (
    ConfigValidationError,
    ExportError,
    InvalidEscapeError,
    InvalidNumberError,
    NestingTooDeepError,
    ParseError,
    RowvalError,
    UnclosedQuoteError,
    UnclosedStringError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from rowval.export import document_to_frame, export_document
from rowval.model import (
    Array,
    Bool,
    Document,
    Null,
    Number,
    Object,
    Row,
    String,
    Value,
    to_python,
)
from rowval.parsers import RowParser, ValueParser
from rowval.reader import read_document, read_value

__all__ = [
    "parse_line",
    "parse_document",
    "parse_value",
    "parse_complete_value",
    "read_document",
    "read_value",
    "document_to_frame",
    "export_document",
    "to_python",
    "RowParser",
    "ValueParser",
    "ParserConfig",
    "load_config",
    "save_config",
    "Value",
    "Null",
    "Bool",
    "Number",
    "String",
    "Array",
    "Object",
    "Row",
    "Document",
    "RowvalError",
    "ParseError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "InvalidNumberError",
    "InvalidEscapeError",
    "UnclosedStringError",
    "UnclosedQuoteError",
    "NestingTooDeepError",
    "ConfigValidationError",
    "ExportError",
]


def parse_line(text: str, delimiter: str = ",") -> Row:
    """Parse one line into trimmed fields.

    Examples::

        rowval.parse_line('John Doe, 30, "New York, NY"')
        # ['John Doe', '30', 'New York, NY']

    Raises:
        UnclosedQuoteError: If a quoted field never closes.
    """
    return RowParser(delimiter).parse_line(text)


def parse_document(text: str, delimiter: str = ",") -> Document:
    """Parse multi-line text into rows, skipping blank lines.

    Raises:
        ParseError: From the first malformed line, with ``line`` set.
    """
    return RowParser(delimiter).parse_document(text)


def parse_value(text: str, max_depth: int = 64) -> tuple[Value, str]:
    """Parse the value at the start of *text*.

    Returns:
        ``(value, remainder)`` -- remainder is the unconsumed suffix.

    Raises:
        ParseError: Any subclass; ``NestingTooDeepError`` past *max_depth*.
    """
    return ValueParser(max_depth).parse_value(text)


def parse_complete_value(text: str, max_depth: int = 64) -> Value:
    """Parse *text* as exactly one value (trailing whitespace allowed)."""
    return ValueParser(max_depth).parse_complete(text)
