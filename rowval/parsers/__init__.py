"""
Parsers sub-package for rowval.

Design: Strategy Pattern
- base.py defines the BaseParser ABC and the immutable Cursor.
- row.py implements RowParser for delimited rows and multi-line documents.
- value.py implements ValueParser for recursively structured values.

The two parsers share the error model in ``rowval.exceptions`` but no
runtime state.
"""

from rowval.parsers.base import BaseParser, Cursor
from rowval.parsers.row import RowParser
from rowval.parsers.value import ValueParser

__all__ = ["BaseParser", "Cursor", "RowParser", "ValueParser"]
