"""
Custom exception hierarchy for rowval.

Every syntactic failure derives from ``ParseError`` and carries the
absolute character offset into the text handed to the top-level call.
Callers can catch a specific kind (e.g., ``UnclosedQuoteError`` vs
``InvalidNumberError``) or the whole family at once.

Document-level parsing annotates the failing line's error with ``line``
and re-raises it, so the error kind never changes on the way up.
"""

from __future__ import annotations


class RowvalError(Exception):
    """Base exception for all rowval errors."""


class ParseError(RowvalError):
    """Base exception for malformed input.

    Attributes:
        position: 0-based character offset of the offending input, or
            ``None`` when no single offset applies.
        line: 1-based line number, set by ``parse_document`` only.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.line: int | None = None

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


class UnexpectedCharacterError(ParseError):
    """Raised when a character does not match what the grammar requires."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(
            f"Unexpected character '{character}' at position {position}",
            position,
        )
        self.character = character


class UnexpectedEndOfInputError(ParseError):
    """Raised when the input runs out where a value was required."""

    def __init__(self, position: int | None = None) -> None:
        super().__init__("Unexpected end of input", position)


class InvalidNumberError(ParseError):
    """Raised when a numeric-looking run fails to convert to a float.

    ``text`` is the offending substring; it is empty when no character
    could be consumed at all.
    """

    def __init__(self, text: str, position: int | None = None) -> None:
        super().__init__(f"Invalid number: {text}", position)
        self.text = text


class InvalidEscapeError(ParseError):
    """Raised for an escape sequence other than ``\\n \\t \\r \\" \\\\``."""

    def __init__(self, character: str, position: int | None = None) -> None:
        super().__init__(f"Invalid escape sequence: \\{character}", position)
        self.character = character


class UnclosedStringError(ParseError):
    """Raised when a quoted string never finds its closing quote.

    ``position`` points at the opening quote.
    """

    def __init__(self, position: int | None = None) -> None:
        super().__init__("Unclosed string", position)


class UnclosedQuoteError(ParseError):
    """Raised by the row parser when a quoted field never closes.

    ``position`` points at the quote that opened the field.
    """

    def __init__(self, position: int | None = None) -> None:
        super().__init__("Unclosed quote", position)


class NestingTooDeepError(ParseError):
    """Raised when array/object nesting exceeds the configured limit."""

    def __init__(self, max_depth: int, position: int | None = None) -> None:
        super().__init__(
            f"Nesting too deep: more than {max_depth} levels",
            position,
        )
        self.max_depth = max_depth


class ConfigValidationError(RowvalError):
    """Raised when a rowval config file cannot be used.

    Schema violations inside the file surface as
    ``pydantic.ValidationError`` instead.
    """


class ExportError(RowvalError):
    """Raised when a Document cannot be turned into a table or written.

    For example, a row wider than the header row, or a failed Parquet write.
    """
