"""
Base parser protocol / ABC and the shared parse cursor for rowval.

The contract is:
1. parse() takes the whole input text and returns ``(result, remainder)``.
2. ``remainder`` is always a suffix of the input -- parsers never invent
   or reorder characters.

Sub-parsers do not share a mutable position. They pass an immutable
``Cursor`` around instead: each step returns a *new* cursor, so any
intermediate state can be inspected or retried without side effects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Cursor:
    """Immutable view into *text* starting at *offset*.

    ``offset`` is absolute, so errors raised from deep inside nested
    structures still report the position in the full input.
    """

    text: str
    offset: int = 0

    @property
    def remainder(self) -> str:
        return self.text[self.offset:]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str | None:
        """Return the current character, or ``None`` at end of input."""
        if self.at_end:
            return None
        return self.text[self.offset]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.offset)

    def advance(self, count: int = 1) -> Cursor:
        return Cursor(self.text, min(self.offset + count, len(self.text)))

    def skip_whitespace(self) -> Cursor:
        end = self.offset
        while end < len(self.text) and self.text[end].isspace():
            end += 1
        if end == self.offset:
            return self
        return Cursor(self.text, end)


class BaseParser(ABC, Generic[T]):
    """Abstract base class for rowval parsers.

    Subclasses implement parse(). Configuration is fixed at construction
    time; parse() itself keeps no state between calls, so one instance can
    be shared across threads.
    """

    @abstractmethod
    def parse(self, text: str) -> tuple[T, str]:
        """Parse one unit from the start of *text*.

        Returns:
            ``(result, remainder)`` where remainder is the unconsumed suffix.

        Raises:
            ParseError: If the input is malformed.
        """
