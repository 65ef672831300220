"""
Row conversion driver.

convert_rows() resolves the column map once for the whole input, then extracts
and maps each row in order. A row that fails is logged and recorded in
ConversionResult.failures; it never aborts the run. The run-level counters live
on the returned ConversionResult rather than in module state.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Mapping, Sequence

from config import PROGRESS_EVERY
from domain.canonical import CanonicalField, ColumnMap, OutputRecord, RawRow
from fields.numbers import BRAZILIAN, NumberFormat

from .column_resolver import collect_headers, diagnose_columns, resolve
from .description import INFERRED_SOURCES, SOURCE_PLACEHOLDER
from .field_extractor import extract
from .record_mapper import map_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowFailure:
    row_number: int
    message: str


@dataclass(frozen=True)
class PlaceholderRow:
    row_number: int
    code: str


@dataclass
class ConversionResult:
    records: List[OutputRecord] = field(default_factory=list)
    failures: List[RowFailure] = field(default_factory=list)
    column_map: ColumnMap = field(default_factory=dict)
    descriptions_by_source: Counter = field(default_factory=Counter)
    placeholder_rows: List[PlaceholderRow] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.records)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def inferred_descriptions(self) -> int:
        return sum(self.descriptions_by_source[s] for s in INFERRED_SOURCES)


def log_column_map(colmap: ColumnMap) -> None:
    logger.info("Column mapping:")
    for f in CanonicalField:
        logger.info("  - %s: %s", f.value, colmap.get(f) or "NOT FOUND")


def log_column_diagnostics(rows: Sequence[RawRow]) -> None:
    report = diagnose_columns(rows)
    logger.debug("Column diagnostics: %d rows, %d columns", report.total_rows, len(report.columns))
    for prof in report.columns:
        logger.debug(
            '  - "%s": %d values (%.0f%%) samples=%r',
            prof.name, prof.filled, 100 * prof.fill_ratio(report.total_rows), prof.samples,
        )
    for rank, prof in enumerate(report.description_candidates[:5], start=1):
        logger.debug('Description candidate %d: "%s" (score %.1f)', rank, prof.name, prof.score)


def convert_rows(
    rows: Sequence[RawRow],
    strict: bool = False,
    number_format: NumberFormat = BRAZILIAN,
    progress_every: int = PROGRESS_EVERY,
) -> ConversionResult:
    """Convert raw rows into output records; failed rows are skipped and reported."""
    result = ConversionResult()
    total = len(rows)
    if total == 0:
        return result

    result.column_map = resolve(collect_headers(rows))
    log_column_map(result.column_map)
    if logger.isEnabledFor(logging.DEBUG):
        log_column_diagnostics(rows)

    for index, row in enumerate(rows):
        row_number = index + 1
        try:
            if not isinstance(row, Mapping):
                raise TypeError("row is not a mapping")
            extracted = extract(row, result.column_map, index, number_format)
            record = map_record(extracted, index, strict=strict)
        except Exception as e:
            logger.error("Row %d could not be converted: %s", row_number, e)
            result.failures.append(RowFailure(row_number=row_number, message=str(e)))
        else:
            source = extracted["description_source"]
            result.descriptions_by_source[source] += 1
            if source == SOURCE_PLACEHOLDER:
                result.placeholder_rows.append(
                    PlaceholderRow(row_number=row_number, code=extracted["code"] or f"Item #{row_number}")
                )
            result.records.append(record)

        if progress_every and (row_number % progress_every == 0 or row_number == total):
            logger.info("Processed %d/%d rows", row_number, total)

    return result
