"""
Split a composite "code + description" column into two columns.

Standalone preparation step: the rows keep their original columns, the code cell
is replaced by its prefix and a "Descrição" cell receives the remainder. Rows whose
code has no whitespace are copied unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from domain.canonical import RawRow
from domain.synonyms import CODE_COLUMN_CANDIDATES
from fields.normalization import to_text

from .column_resolver import collect_headers
from .description import split_code

logger = logging.getLogger(__name__)

DESCRIPTION_COLUMN = "Descrição"


@dataclass
class SplitResult:
    rows: List[RawRow] = field(default_factory=list)
    code_column: Optional[str] = None
    split_count: int = 0
    unsplit_count: int = 0


def detect_code_column(headers: Sequence[str]) -> Optional[str]:
    """Exact candidate match, else first header containing 'cod', else the first header."""
    if not headers:
        return None

    for cand in CODE_COLUMN_CANDIDATES:
        if cand in headers:
            return cand

    for header in headers:
        if "cod" in header.lower():
            return header

    logger.warning('Code column not found, using first column "%s"', headers[0])
    return headers[0]


def split_code_column(rows: Sequence[RawRow], code_column: Optional[str] = None) -> SplitResult:
    headers = collect_headers(rows)
    result = SplitResult(code_column=code_column or detect_code_column(headers))
    if result.code_column is None:
        return result

    logger.info('Using column "%s" as code', result.code_column)

    for row in rows:
        new_row = dict(row)
        code = to_text(row.get(result.code_column))
        if code:
            prefix, remainder = split_code(code)
            if remainder:
                new_row[result.code_column] = prefix
                new_row[DESCRIPTION_COLUMN] = remainder
                result.split_count += 1
            else:
                result.unsplit_count += 1
        result.rows.append(new_row)

    return result
