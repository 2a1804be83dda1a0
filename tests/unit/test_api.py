"""
Unit tests for the public API surface (rowval/__init__.py).

Exercises the module-level convenience functions with the examples the
parsers are documented against.
"""

from __future__ import annotations

import threading

import pytest

import rowval
from rowval import (
    Array,
    Bool,
    NestingTooDeepError,
    Null,
    Number,
    Object,
    ParseError,
    RowvalError,
    String,
    UnclosedQuoteError,
    UnexpectedCharacterError,
)


class TestRowApi:
    """Tests for parse_line() / parse_document()."""

    def test_parse_line(self):
        assert rowval.parse_line("name,age,city") == ["name", "age", "city"]

    def test_parse_line_delimiter(self):
        assert rowval.parse_line("a | b", delimiter="|") == ["a", "b"]

    def test_parse_line_empty(self):
        assert rowval.parse_line("") == []

    def test_parse_line_unclosed(self):
        with pytest.raises(UnclosedQuoteError):
            rowval.parse_line('"abc')

    def test_parse_document_skips_blank(self):
        assert len(rowval.parse_document("a,b\n\nc,d")) == 2


class TestValueApi:
    """Tests for parse_value() / parse_complete_value()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("null", Null()),
            ("true", Bool(True)),
            ("123.45", Number(123.45)),
            ('"hello world"', String("hello world")),
            ("[1, 2, 3]", Array([Number(1.0), Number(2.0), Number(3.0)])),
            ('{"a":1,"b":2}', Object([("a", Number(1.0)), ("b", Number(2.0))])),
        ],
    )
    def test_documented_examples(self, text, expected):
        assert rowval.parse_value(text) == (expected, "")

    @pytest.mark.parametrize("text", ["[1,]", '{"a":1,}', '{"a" 1}'])
    def test_malformed(self, text):
        with pytest.raises(UnexpectedCharacterError):
            rowval.parse_value(text)

    def test_depth_argument(self):
        with pytest.raises(NestingTooDeepError):
            rowval.parse_value("[[1]]", max_depth=1)

    def test_parse_complete_value(self):
        assert rowval.parse_complete_value(" [true] ") == Array([Bool(True)])

    def test_composition_through_remainder(self):
        """Chained calls consume a stream of values via the remainder."""
        text = '1 "two" [3] {"four": 4}'
        values = []
        rest = text
        while rest.strip():
            value, rest = rowval.parse_value(rest)
            values.append(rowval.to_python(value))
        assert values == [1.0, "two", [3.0], {"four": 4.0}]


class TestErrorHierarchy:
    """Every parse failure is catchable as ParseError / RowvalError."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda: rowval.parse_line('"x'),
            lambda: rowval.parse_value("-"),
            lambda: rowval.parse_value('"\\q"'),
            lambda: rowval.parse_value('"open'),
            lambda: rowval.parse_value(""),
            lambda: rowval.parse_value("[" * 100),
        ],
    )
    def test_catchable(self, call):
        with pytest.raises(ParseError) as info:
            call()
        assert isinstance(info.value, RowvalError)


class TestThreadSafety:
    """One parser instance can serve independent inputs from many threads."""

    def test_shared_parser(self):
        parser = rowval.ValueParser()
        results: dict[int, object] = {}

        def work(i: int) -> None:
            value, _ = parser.parse_value(f'{{"n": {i}, "items": [{i}, {i}]}}')
            results[i] = rowval.to_python(value)

        threads = [threading.Thread(target=work, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {
            i: {"n": float(i), "items": [float(i), float(i)]} for i in range(16)
        }
