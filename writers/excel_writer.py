"""
EXCEL WRITER
------------
Writes output rows to a single-sheet workbook with a fixed header order.

write_output() is what the CLI uses: it tries the .xlsx first and, if that fails,
falls back to a comma-separated file with the same base name. Only when both fail
is OutputWriteError raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font

from config import OUTPUT_SHEET_NAME
from domain.schemas import OUTPUT_HEADERS

logger = logging.getLogger(__name__)


class OutputWriteError(RuntimeError):
    """Raised when neither the workbook nor the CSV fallback could be written."""
    pass


def write_rows_to_xlsx(
    output_path: Path,
    sheet_name: str,
    headers: Sequence[str],
    rows: List[Dict[str, Any]],
) -> Path:
    """Write `rows` under `headers` (in that order) to a new workbook."""
    output_path = Path(output_path)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.append(list(headers))
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in rows:
        ws.append([row.get(h) for h in headers])

    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output_path)
    return output_path


def write_rows_to_csv(
    output_path: Path,
    headers: Sequence[str],
    rows: List[Dict[str, Any]],
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(rows, columns=list(headers))
    df.to_csv(output_path, index=False, encoding="utf-8")
    return output_path


def write_output(
    output_path: Path,
    rows: List[Dict[str, Any]],
    headers: Sequence[str] = OUTPUT_HEADERS,
    sheet_name: str = OUTPUT_SHEET_NAME,
) -> Path:
    """Write the workbook, falling back to CSV; return the path actually written."""
    output_path = Path(output_path)
    try:
        return write_rows_to_xlsx(output_path, sheet_name, headers, rows)
    except Exception as e:
        csv_path = output_path.with_suffix(".csv")
        logger.warning("Could not write %s (%s); saving as CSV to %s", output_path, e, csv_path)
        try:
            return write_rows_to_csv(csv_path, headers, rows)
        except Exception as csv_error:
            logger.error("CSV fallback failed too: %s", csv_error)
            raise OutputWriteError(f"Could not write {output_path} or {csv_path}: {e}") from e
