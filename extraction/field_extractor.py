"""
Per-row field extraction into the ExtractedRecord format.

extract() reads every canonical field through the resolved ColumnMap, trims text,
parses prices and stock with the configured NumberFormat and infers the
description (see extraction.description). It never raises: anything missing or
unparseable falls back to "" for text and 0 for prices/stock.
"""

from __future__ import annotations

from domain.canonical import NUMERIC_FIELDS, CanonicalField, ColumnMap, ExtractedRecord, RawRow
from fields.numbers import BRAZILIAN, NumberFormat, parse_number
from fields.normalization import to_text

from .description import infer_description

NUMERIC_DEFAULT = 0


def _cell(row: RawRow, colmap: ColumnMap, f: CanonicalField):
    col = colmap.get(f)
    if col is None:
        return None
    return row.get(col)


def extract(
    row: RawRow,
    colmap: ColumnMap,
    row_index: int,
    number_format: NumberFormat = BRAZILIAN,
) -> ExtractedRecord:
    """Build a best-effort ExtractedRecord for one raw row."""
    record: ExtractedRecord = {}

    for f in CanonicalField:
        raw = _cell(row, colmap, f)
        if f in NUMERIC_FIELDS:
            record[f.value] = parse_number(raw, NUMERIC_DEFAULT, number_format)
        else:
            record[f.value] = to_text(raw)

    description, code, source = infer_description(row, colmap, record["code"], row_index)
    record["description"] = description
    record["code"] = code
    record["description_source"] = source

    return record
