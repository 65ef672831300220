"""
EXCEL READER
------------
Reads the first sheet of an Excel file into raw dict rows with NO transformation.
Returns list of dicts with the original column names as keys.

If openpyxl cannot load the workbook normally, it is read once more in
read-only streaming mode, which tolerates some malformed files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from openpyxl import load_workbook

from fields.normalization import is_blank

logger = logging.getLogger(__name__)


class InvalidWorkbookError(ValueError):
    """Raised when the file cannot be read as a workbook in any mode."""
    pass


def _rows_from_values(values: Iterable[Sequence[Any]]) -> List[Dict[str, Any]]:
    """Row 1 = headers, rows 2+ = data; empty cells become "" and blank rows are skipped."""
    it = iter(values)
    try:
        header_cells = next(it)
    except StopIteration:
        return []

    headers: List[str] = []
    seen: Dict[str, int] = {}
    for c, h in enumerate(header_cells, start=1):
        name = str(h).strip() if h is not None else f"col_{c}"
        # Repeated names get a numeric suffix: Nome, Nome_1, Nome_2
        base = name
        while name in seen:
            seen[base] += 1
            name = f"{base}_{seen[base]}"
        seen[name] = 0
        headers.append(name)

    rows: List[Dict[str, Any]] = []
    for cells in it:
        cells = list(cells or ())
        row: Dict[str, Any] = {}
        is_empty = True

        for c, header in enumerate(headers):
            value = cells[c] if c < len(cells) else None
            if not is_blank(value):
                is_empty = False
            row[header] = "" if value is None else value

        if not is_empty:
            rows.append(row)

    return rows


def _read_sheet(xlsx_path: Path, sheet_name: str | None, permissive: bool) -> List[Dict[str, Any]]:
    if permissive:
        wb = load_workbook(xlsx_path, read_only=True, data_only=True, keep_links=False)
    else:
        wb = load_workbook(xlsx_path, data_only=True)

    try:
        if not wb.sheetnames:
            raise InvalidWorkbookError(f"Workbook has no sheets: {xlsx_path}")
        if sheet_name and sheet_name not in wb.sheetnames:
            raise InvalidWorkbookError(f"Sheet '{sheet_name}' not found in {xlsx_path.name}")

        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]
        return _rows_from_values(ws.iter_rows(values_only=True))
    finally:
        wb.close()


def read_excel(xlsx_path: Path, sheet_name: str | None = None) -> List[Dict[str, Any]]:
    """
    Read Excel file where row 1 = headers, rows 2+ = data.

    Args:
        xlsx_path: Path to Excel file
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        List of row dicts with original headers as keys

    Raises:
        FileNotFoundError: If file doesn't exist
        InvalidWorkbookError: If the file cannot be read in normal or permissive mode
    """
    xlsx_path = Path(xlsx_path).expanduser().resolve()

    if not xlsx_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xlsx_path}")

    try:
        return _read_sheet(xlsx_path, sheet_name, permissive=False)
    except InvalidWorkbookError:
        raise
    except Exception as e:
        logger.warning("Could not read %s (%s); retrying in permissive mode", xlsx_path.name, e)

    try:
        return _read_sheet(xlsx_path, sheet_name, permissive=True)
    except InvalidWorkbookError:
        raise
    except Exception as e:
        raise InvalidWorkbookError(
            f"Cannot read Excel file (is it corrupted or wrong format?): {e}"
        ) from e
