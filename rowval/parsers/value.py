"""
Recursive-descent value parser for rowval.

Grammar (whitespace allowed before every token)::

    value  := null | bool | number | string | array | object
    null   := "null"
    bool   := "true" | "false"
    number := "-"? (digit | ".")*        -- at most one ".", then float()
    string := '"' (char | "\\" [ntr"\\])* '"'
    array  := "[" (value ("," value)*)? "]"
    object := "{" (string ":" value ("," string ":" value)*)? "}"

Every sub-parser is a plain function ``(Cursor, ...) -> (Value, Cursor)``.
The first significant character picks the sub-parser; each one skips its
own leading whitespace, so callers never need to pre-trim.

Nesting is bounded by an explicit depth counter threaded through the
array/object parsers. Crossing ``max_depth`` raises
``NestingTooDeepError`` long before the interpreter's recursion limit.
"""

from __future__ import annotations

import logging

from rowval.config import ParserConfig, ValueConfig
from rowval.exceptions import (
    InvalidEscapeError,
    InvalidNumberError,
    NestingTooDeepError,
    UnclosedStringError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from rowval.model import Array, Bool, Null, Number, Object, String, Value
from rowval.parsers.base import BaseParser, Cursor

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

END_OF_INPUT = "\0"

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def _unexpected(cursor: Cursor) -> UnexpectedCharacterError:
    """Build the error for whatever sits at *cursor*.

    A missing token at end of input is still an unexpected character; the
    character is reported as ``END_OF_INPUT``. Only the dispatcher raises
    ``UnexpectedEndOfInputError``, where a whole value is missing.
    """
    ch = cursor.peek()
    if ch is None:
        ch = END_OF_INPUT
    return UnexpectedCharacterError(ch, cursor.offset)


def _expect(cursor: Cursor, token: str) -> Cursor:
    """Consume *token* at *cursor* or raise for the character found instead."""
    if not cursor.startswith(token):
        raise _unexpected(cursor)
    return cursor.advance(len(token))


# ---------------------------------------------------------------------------
# Scalar sub-parsers
# ---------------------------------------------------------------------------

def parse_null(cursor: Cursor) -> tuple[Null, Cursor]:
    cursor = cursor.skip_whitespace()
    return Null(), _expect(cursor, "null")


def parse_bool(cursor: Cursor) -> tuple[Bool, Cursor]:
    cursor = cursor.skip_whitespace()
    if cursor.startswith("true"):
        return Bool(True), cursor.advance(4)
    if cursor.startswith("false"):
        return Bool(False), cursor.advance(5)
    raise _unexpected(cursor)


def parse_number(cursor: Cursor) -> tuple[Number, Cursor]:
    """Greedily consume ``-``, numeric characters and one ``.``, then convert.

    Any Unicode numeric character extends the run, but only ASCII digits
    convert; a run holding others is rejected whole.

    Raises:
        InvalidNumberError: If nothing was consumed, the run holds a
            non-ASCII numeric character, or float() rejects it (a lone
            ``-`` or ``.``).
    """
    cursor = cursor.skip_whitespace()
    text = cursor.text
    start = end = cursor.offset
    has_dot = False

    while end < len(text):
        ch = text[end]
        if ch.isnumeric():
            pass
        elif ch == "." and not has_dot:
            has_dot = True
        elif ch == "-" and end == start:
            pass
        else:
            break
        end += 1

    run = text[start:end]
    if not run or any(ch.isnumeric() and ch not in DIGITS for ch in run):
        raise InvalidNumberError(run, start)
    try:
        number = float(run)
    except ValueError:
        raise InvalidNumberError(run, start) from None
    return Number(number), Cursor(text, end)


def parse_string(cursor: Cursor) -> tuple[String, Cursor]:
    """Parse a double-quoted string, decoding ``\\n \\t \\r \\" \\\\``.

    Raises:
        UnexpectedCharacterError: If the input does not start with a quote.
        InvalidEscapeError: For any other escaped character.
        UnclosedStringError: If the input ends before the closing quote.
    """
    cursor = cursor.skip_whitespace()
    opening = cursor.offset
    cursor = _expect(cursor, '"')

    text = cursor.text
    chars: list[str] = []
    index = cursor.offset
    while index < len(text):
        ch = text[index]
        if ch == '"':
            return String("".join(chars)), Cursor(text, index + 1)
        if ch == "\\":
            index += 1
            if index >= len(text):
                break
            escaped = text[index]
            if escaped not in _ESCAPES:
                raise InvalidEscapeError(escaped, index - 1)
            chars.append(_ESCAPES[escaped])
        else:
            chars.append(ch)
        index += 1

    raise UnclosedStringError(opening)


# ---------------------------------------------------------------------------
# Container sub-parsers
# ---------------------------------------------------------------------------

def _enter(cursor: Cursor, opener: str, depth: int, max_depth: int) -> Cursor:
    """Consume *opener* and enforce the nesting limit for the new level."""
    cursor = cursor.skip_whitespace()
    opened_at = cursor.offset
    cursor = _expect(cursor, opener)
    if depth + 1 > max_depth:
        logger.debug("Nesting limit %d reached at offset %d", max_depth, opened_at)
        raise NestingTooDeepError(max_depth, opened_at)
    return cursor


def _separator(cursor: Cursor, first: bool) -> Cursor:
    """Require a ``,`` before every element except the first."""
    if first:
        return cursor
    return _expect(cursor, ",").skip_whitespace()


def parse_array(
    cursor: Cursor, depth: int = 0, max_depth: int = 64
) -> tuple[Array, Cursor]:
    cursor = _enter(cursor, "[", depth, max_depth)
    items: list[Value] = []

    while True:
        cursor = cursor.skip_whitespace()
        if cursor.startswith("]"):
            return Array(items), cursor.advance()
        cursor = _separator(cursor, not items)
        item, cursor = parse_value_at(cursor, depth + 1, max_depth)
        items.append(item)


def parse_object(
    cursor: Cursor, depth: int = 0, max_depth: int = 64
) -> tuple[Object, Cursor]:
    """Parse ``{...}``; keys keep insertion order and may repeat."""
    cursor = _enter(cursor, "{", depth, max_depth)
    pairs: list[tuple[str, Value]] = []

    while True:
        cursor = cursor.skip_whitespace()
        if cursor.startswith("}"):
            return Object(pairs), cursor.advance()
        cursor = _separator(cursor, not pairs)

        key, cursor = parse_string(cursor)
        cursor = _expect(cursor.skip_whitespace(), ":")
        item, cursor = parse_value_at(cursor, depth + 1, max_depth)
        pairs.append((key.value, item))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def parse_value_at(
    cursor: Cursor, depth: int = 0, max_depth: int = 64
) -> tuple[Value, Cursor]:
    """Parse one value starting at *cursor*, dispatching on its first character.

    *depth* is the number of containers already open around this value.
    """
    cursor = cursor.skip_whitespace()
    ch = cursor.peek()

    if ch is None:
        raise UnexpectedEndOfInputError(cursor.offset)
    if ch == "n":
        return parse_null(cursor)
    if ch in "tf":
        return parse_bool(cursor)
    if ch == '"':
        return parse_string(cursor)
    if ch == "[":
        return parse_array(cursor, depth, max_depth)
    if ch == "{":
        return parse_object(cursor, depth, max_depth)
    if ch == "-" or ch in DIGITS:
        return parse_number(cursor)
    raise UnexpectedCharacterError(ch, cursor.offset)


class ValueParser(BaseParser[Value]):
    """Parser for null/bool/number/string/array/object values.

    Holds only the nesting limit; every call starts from a fresh cursor.
    """

    def __init__(self, max_depth: int = 64) -> None:
        self._config = ValueConfig(max_depth=max_depth)

    @classmethod
    def from_config(cls, config: ParserConfig) -> ValueParser:
        return cls(max_depth=config.value.max_depth)

    @property
    def max_depth(self) -> int:
        return self._config.max_depth

    def parse_value(self, text: str) -> tuple[Value, str]:
        """Parse one value from the start of *text*.

        Returns:
            ``(value, remainder)``; remainder is the unconsumed suffix.

        Raises:
            ParseError: Any subclass, with ``position`` as an offset into *text*.
        """
        value, cursor = parse_value_at(Cursor(text), 0, self.max_depth)
        return value, cursor.remainder

    def parse(self, text: str) -> tuple[Value, str]:
        return self.parse_value(text)

    def parse_complete(self, text: str) -> Value:
        """Parse *text* as exactly one value, allowing only trailing whitespace.

        Raises:
            UnexpectedCharacterError: At the first non-whitespace character
                after the value.
        """
        value, cursor = parse_value_at(Cursor(text), 0, self.max_depth)
        cursor = cursor.skip_whitespace()
        if not cursor.at_end:
            raise UnexpectedCharacterError(cursor.peek(), cursor.offset)
        return value
