"""
Tabular consumer for rowval.

Turns a parsed Document into a ``pandas.DataFrame`` and optionally writes
it to Parquet.

Conversion rules:
- With ``header=True`` the first row names the columns; otherwise columns
  are numbered from 0.
- Rows shorter than the widest row are padded with missing values.
- A data row wider than the header row raises ``ExportError`` (the extra
  cells would have no column name).
- With ``parse_numbers=True`` a column is coerced to numeric dtype only
  when every non-empty cell converts; mixed columns stay as strings.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from rowval.exceptions import ExportError
from rowval.model import Document

logger = logging.getLogger(__name__)


def _coerce_numeric_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Convert columns whose non-empty cells are all numeric."""
    df = df.copy()
    for col in df.columns:
        cells = df[col].map(lambda v: v.strip() if isinstance(v, str) else "")
        non_empty = cells != ""
        if not non_empty.any():
            continue
        converted = pd.to_numeric(cells.where(non_empty), errors="coerce")
        if converted[non_empty].notna().all():
            df[col] = converted
    return df


def document_to_frame(
    document: Document,
    header: bool = True,
    parse_numbers: bool = False,
) -> pd.DataFrame:
    """Build a DataFrame from a Document.

    Args:
        document: Rows from ``RowParser.parse_document``.
        header: If True, use the first row as column names.
        parse_numbers: If True, coerce all-numeric columns.

    Returns:
        A DataFrame with one row per data row, cells as strings (or numbers
        for coerced columns), padded cells as missing values.

    Raises:
        ExportError: If a data row is wider than the header row, or the
            header repeats a column name.
    """
    if header and document:
        columns = list(document[0])
        rows = document[1:]
        if len(set(columns)) != len(columns):
            raise ExportError(f"Header row repeats a column name: {columns}")
        for index, row in enumerate(rows, start=2):
            if len(row) > len(columns):
                raise ExportError(
                    f"Row {index} has {len(row)} fields but the header has "
                    f"{len(columns)}"
                )
    else:
        rows = document
        columns = list(range(max((len(row) for row in rows), default=0)))

    width = len(columns)
    padded = [list(row) + [None] * (width - len(row)) for row in rows]
    df = pd.DataFrame(padded, columns=columns, dtype=object)

    if parse_numbers:
        df = _coerce_numeric_columns(df)
    return df


def export_document(
    document: Document,
    path: str | Path,
    header: bool = True,
    parse_numbers: bool = False,
) -> str:
    """Write a Document to a Parquet file.

    The parent directory is created if needed. Column names are written as
    strings (Parquet requires string field names).

    Returns:
        The written path as a string.

    Raises:
        ExportError: If the Document cannot be tabulated or the write fails.
    """
    df = document_to_frame(document, header=header, parse_numbers=parse_numbers)
    df.columns = [str(col) for col in df.columns]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(f"Failed to write {path.name} as parquet: {exc}") from exc

    logger.info(
        "Exported document -> %s (%d rows, %d cols)",
        path.name, len(df), len(df.columns),
    )
    return str(path)
