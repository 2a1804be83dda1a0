"""
Text source for rowval.

Reads a whole file from disk and hands the text to the row or value
parser. Files are read in one go: there is no incremental parsing, the
parsers always see the complete input.

The encoding comes from ``ReaderConfig`` (``utf-8-sig`` by default, which
drops a leading BOM so it never leaks into the first field or value).
"""

from __future__ import annotations

import logging
from pathlib import Path

from rowval.config import ParserConfig
from rowval.model import Document, Value
from rowval.parsers.row import RowParser
from rowval.parsers.value import ValueParser

logger = logging.getLogger(__name__)


def read_text(path: str | Path, config: ParserConfig | None = None) -> str:
    """Read *path* as text using the configured encoding.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    if config is None:
        config = ParserConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    with open(path, "r", encoding=config.reader.encoding, newline="") as f:
        text = f.read()
    logger.debug("Read %d characters from %s", len(text), path.name)
    return text


def read_document(
    path: str | Path, config: ParserConfig | None = None
) -> Document:
    """Read a delimited file and parse it into a Document.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParseError: If any line is malformed (``line`` is set on the error).
    """
    if config is None:
        config = ParserConfig()
    text = read_text(path, config)
    document = RowParser.from_config(config).parse_document(text)
    logger.info(
        "Parsed %s: %d rows (delimiter=%r)",
        Path(path).name, len(document), config.row.delimiter,
    )
    return document


def read_value(path: str | Path, config: ParserConfig | None = None) -> Value:
    """Read a file holding exactly one value and parse it.

    Trailing whitespace is allowed; anything else after the value is an
    error.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParseError: If the content is malformed.
    """
    if config is None:
        config = ParserConfig()
    text = read_text(path, config)
    value = ValueParser.from_config(config).parse_complete(text)
    logger.info("Parsed %s: %s value", Path(path).name, type(value).__name__)
    return value
