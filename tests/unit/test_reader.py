"""
Unit tests for the text source (rowval.reader).

Writes small inline inputs to temporary files and reads them back
through read_document() / read_value().
"""

from __future__ import annotations

import pytest

from rowval.config import ParserConfig, ReaderConfig, RowConfig, ValueConfig
from rowval.exceptions import NestingTooDeepError, UnclosedQuoteError, UnexpectedCharacterError
from rowval.model import Array, Number, Object, String
from rowval.reader import read_document, read_text, read_value


class TestReadText:
    """Tests for read_text()."""

    def test_bom_stripped_by_default(self, tmp_path):
        f = tmp_path / "bom.csv"
        f.write_text("a,b\n", encoding="utf-8-sig")
        assert read_text(f) == "a,b\n"

    def test_line_endings_preserved(self, tmp_path):
        f = tmp_path / "crlf.csv"
        f.write_bytes(b"a\r\nb\r\n")
        assert read_text(f) == "a\r\nb\r\n"

    def test_configured_encoding(self, tmp_path):
        f = tmp_path / "kr.csv"
        f.write_text("코드,코드명\n", encoding="cp949")
        config = ParserConfig(reader=ReaderConfig(encoding="cp949"))
        assert read_text(f, config) == "코드,코드명\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Input file not found"):
            read_text(tmp_path / "missing.csv")


class TestReadDocument:
    """Tests for read_document()."""

    def test_default_comma(self, tmp_path):
        f = tmp_path / "data.csv"
        f.write_text('name,city\n\nKim, "Seoul, KR"\n', encoding="utf-8")
        assert read_document(f) == [["name", "city"], ["Kim", "Seoul, KR"]]

    def test_configured_delimiter(self, tmp_path):
        f = tmp_path / "data.tsv"
        f.write_text("a\tb\nc\td\n", encoding="utf-8")
        config = ParserConfig(row=RowConfig(delimiter="\t"))
        assert read_document(f, config) == [["a", "b"], ["c", "d"]]

    def test_bad_line_reports_line_number(self, tmp_path):
        f = tmp_path / "bad.csv"
        f.write_text('a,b\r\nc,"d\r\n', encoding="utf-8")
        with pytest.raises(UnclosedQuoteError) as info:
            read_document(f)
        assert info.value.line == 2


class TestReadValue:
    """Tests for read_value()."""

    def test_object_file(self, tmp_path):
        f = tmp_path / "payload.json"
        f.write_text('{\n  "name": "rowval",\n  "tags": [1, 2]\n}\n', encoding="utf-8")
        assert read_value(f) == Object([
            ("name", String("rowval")),
            ("tags", Array([Number(1.0), Number(2.0)])),
        ])

    def test_trailing_content_rejected(self, tmp_path):
        f = tmp_path / "two.json"
        f.write_text("1 2", encoding="utf-8")
        with pytest.raises(UnexpectedCharacterError):
            read_value(f)

    def test_configured_depth(self, tmp_path):
        f = tmp_path / "deep.json"
        f.write_text("[[[]]]", encoding="utf-8")
        config = ParserConfig(value=ValueConfig(max_depth=2))
        with pytest.raises(NestingTooDeepError):
            read_value(f, config)
