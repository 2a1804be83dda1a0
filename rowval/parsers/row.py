"""
Delimiter/quote-aware row parser for rowval.

A single left-to-right scan per line, tracking two flags:

- ``in_quotes``: toggled by every unescaped double quote. The quote
  itself is never kept, so ``"a,b"`` reads back as ``a,b``.
- ``escape_pending``: set by a backslash inside quotes. The following
  character is taken literally, whatever it is.

Fields are trimmed when they are closed. A line with ``n`` delimiters
outside quotes yields ``n + 1`` fields; the empty line yields no fields.
"""

from __future__ import annotations

import logging

from rowval.config import ParserConfig, RowConfig
from rowval.exceptions import ParseError, UnclosedQuoteError
from rowval.model import Document, Row
from rowval.parsers.base import BaseParser

logger = logging.getLogger(__name__)

QUOTE = '"'
ESCAPE = "\\"


class RowParser(BaseParser[Row]):
    """Parser for delimited rows and multi-line documents.

    The delimiter is fixed for the lifetime of the parser.

    Examples::

        parser = RowParser(";")
        parser.parse_line('a; "b;c" ;d')   # ['a', 'b;c', 'd']
    """

    def __init__(self, delimiter: str = ",") -> None:
        self._config = RowConfig(delimiter=delimiter)

    @classmethod
    def from_config(cls, config: ParserConfig) -> RowParser:
        return cls(delimiter=config.row.delimiter)

    @property
    def delimiter(self) -> str:
        return self._config.delimiter

    def parse_line(self, text: str) -> Row:
        """Parse one line of text into trimmed fields.

        Raises:
            UnclosedQuoteError: If a quoted field is still open at the end.
        """
        return self._scan(text, 0)

    def _scan(self, text: str, base_offset: int) -> Row:
        if text == "":
            return []

        fields: Row = []
        current: list[str] = []
        in_quotes = False
        escape_pending = False
        quote_start = 0

        for index, ch in enumerate(text):
            if escape_pending:
                current.append(ch)
                escape_pending = False
            elif ch == ESCAPE and in_quotes:
                escape_pending = True
            elif ch == QUOTE:
                in_quotes = not in_quotes
                if in_quotes:
                    quote_start = index
            elif ch == self.delimiter and not in_quotes:
                fields.append("".join(current).strip())
                current = []
            else:
                current.append(ch)

        if in_quotes:
            raise UnclosedQuoteError(base_offset + quote_start)

        fields.append("".join(current).strip())
        return fields

    def parse_document(self, text: str) -> Document:
        """Parse multi-line text into rows, skipping blank lines.

        The first failing line aborts the whole call; its error is
        re-raised with ``line`` set to the 1-based line number and
        ``position`` as an offset into *text*.
        """
        document: Document = []
        offset = 0
        for line_number, line in enumerate(text.split("\n"), start=1):
            stripped = line[:-1] if line.endswith("\r") else line
            if stripped.strip():
                try:
                    document.append(self._scan(stripped, offset))
                except ParseError as exc:
                    exc.line = line_number
                    raise
            offset += len(line) + 1

        logger.debug("Parsed document: %d rows", len(document))
        return document

    def parse(self, text: str) -> tuple[Row, str]:
        """Parse the first line of *text* and return the lines after it."""
        line, _, rest = text.partition("\n")
        if line.endswith("\r"):
            line = line[:-1]
        return self.parse_line(line), rest
