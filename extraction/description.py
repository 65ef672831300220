"""
Description inference.

Many source spreadsheets have no usable description column, or carry the product
name glued to the code ("123 Parafuso Phillips"). The description is taken from
the first tier that yields a non-empty value:

1. column       the resolved Description column
2. synonym      any header matching DESCRIPTION_SYNONYMS (Nome, Produto, ...)
3. scan         free-text value from any other column, longest wins
4. code         remainder of the code after its first whitespace run
5. placeholder  "Produto N" (N = 1-based row position)

Tier order matters and must not change. Only tier 4 rewrites the code.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from domain.canonical import CanonicalField, ColumnMap, RawRow
from domain.synonyms import DESCRIPTION_EXCLUDED_TOKENS, DESCRIPTION_SYNONYMS
from fields.normalization import has_letter, is_blank, normalize_header, to_text

from .column_resolver import find_column

logger = logging.getLogger(__name__)

SOURCE_COLUMN = "column"
SOURCE_SYNONYM = "synonym"
SOURCE_SCAN = "scan"
SOURCE_CODE = "code"
SOURCE_PLACEHOLDER = "placeholder"

# Tiers that synthesize the description instead of reading a description column
INFERRED_SOURCES = (SOURCE_SCAN, SOURCE_CODE, SOURCE_PLACEHOLDER)

MIN_SCAN_LENGTH = 3

_FIRST_WHITESPACE = re.compile(r"\s+")


def placeholder_description(row_index: int) -> str:
    return f"Produto {row_index + 1}"


def _from_synonyms(row: RawRow) -> str:
    headers = list(row)
    for name in DESCRIPTION_SYNONYMS:
        col = find_column(headers, [name])
        if col is not None and not is_blank(row[col]):
            return to_text(row[col])
    return ""


def _is_excluded(header: str) -> bool:
    norm = normalize_header(header)
    return any(token in norm for token in DESCRIPTION_EXCLUDED_TOKENS)


def _from_scan(row: RawRow) -> Tuple[str, Optional[str]]:
    best, best_col = "", None
    for header, value in row.items():
        if _is_excluded(header) or not isinstance(value, str):
            continue
        text = value.strip()
        if len(text) < MIN_SCAN_LENGTH or not has_letter(text):
            continue
        if len(text) > len(best):
            best, best_col = text, header
    return best, best_col


def split_code(code: str) -> Tuple[str, str]:
    """Split "123 Parafuso Phillips" into ("123", "Parafuso Phillips")."""
    parts = _FIRST_WHITESPACE.split(code.strip(), maxsplit=1)
    if len(parts) < 2:
        return code, ""
    return parts[0], parts[1]


def infer_description(
    row: RawRow,
    colmap: ColumnMap,
    code: str,
    row_index: int,
) -> Tuple[str, str, str]:
    """Return (description, code, source) for one row; the code changes only on a split."""
    row_number = row_index + 1

    desc_col = colmap.get(CanonicalField.DESCRIPTION)
    if desc_col is not None and not is_blank(row.get(desc_col)):
        return to_text(row[desc_col]), code, SOURCE_COLUMN

    description = _from_synonyms(row)
    if description:
        return description, code, SOURCE_SYNONYM

    description, col = _from_scan(row)
    if description:
        logger.debug('Row %d: description taken from column "%s": "%s"', row_number, col, description)
        return description, code, SOURCE_SCAN

    prefix, remainder = split_code(code) if code else (code, "")
    if remainder:
        logger.debug(
            'Row %d: description inferred from code "%s" -> code "%s", description "%s"',
            row_number, code, prefix, remainder,
        )
        return remainder, prefix, SOURCE_CODE

    description = placeholder_description(row_index)
    logger.warning('Row %d: no description found, using "%s"', row_number, description)
    return description, code, SOURCE_PLACEHOLDER
