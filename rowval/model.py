"""
Value model for rowval.

``Value`` is a closed sum type of six frozen dataclasses:

    Null | Bool | Number | String | Array | Object

Container payloads are stored as tuples so a parsed value is immutable
and hashable. ``Object`` keeps its key/value pairs in insertion order and
retains duplicate keys; nothing is sorted or de-duplicated.

``Row`` and ``Document`` are the row parser's outputs: plain lists of
trimmed field strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Union

Row = list[str]
Document = list[Row]


@dataclass(frozen=True)
class Null:
    """The ``null`` literal."""


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Number:
    """A number, always held as a 64-bit float."""

    value: float


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Array:
    """Ordered sequence of values."""

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Object:
    """Ordered sequence of ``(key, value)`` pairs, duplicates retained."""

    pairs: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "pairs", tuple((key, value) for key, value in self.pairs)
        )

    def keys(self) -> list[str]:
        return [key for key, _ in self.pairs]

    def get_all(self, key: str) -> list[Value]:
        """Return every value stored under *key*, in insertion order."""
        return [value for k, value in self.pairs if k == key]


Value = Union[Null, Bool, Number, String, Array, Object]

VALUE_KINDS: tuple[type, ...] = (Null, Bool, Number, String, Array, Object)


def to_python(
    value: Value,
    object_factory: Callable[[Iterable[tuple[str, Any]]], Any] = dict,
) -> Any:
    """Convert a parsed Value into plain Python objects.

    Mapping:
        Null -> None, Bool -> bool, Number -> float, String -> str,
        Array -> list, Object -> ``object_factory(pairs)``.

    With the default ``dict`` factory a later duplicate key overwrites an
    earlier one. Pass ``object_factory=list`` to keep every pair.

    Raises:
        TypeError: If *value* is not one of the six value kinds.
    """
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Number, String)):
        return value.value
    if isinstance(value, Array):
        return [to_python(item, object_factory) for item in value.items]
    if isinstance(value, Object):
        return object_factory(
            (key, to_python(item, object_factory)) for key, item in value.pairs
        )
    raise TypeError(f"Not a rowval value: {type(value).__name__}")
