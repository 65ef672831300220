"""
Shared fixtures: small workbooks are built on the fly in tmp_path.
"""

from pathlib import Path

import pytest
from openpyxl import Workbook, load_workbook


@pytest.fixture
def make_xlsx(tmp_path):
    """Factory writing `headers` + `rows` (lists of cell values) to tmp_path/name."""

    def _make(name, headers, rows, sheet_title="Planilha1"):
        path = tmp_path / name
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_title
        ws.append(headers)
        for row in rows:
            ws.append(row)
        wb.save(path)
        return path

    return _make


@pytest.fixture
def read_sheet():
    """Return a reader giving (sheet title, list of row tuples) for the first sheet of a file."""

    def _read(path: Path):
        wb = load_workbook(path, data_only=True)
        ws = wb.worksheets[0]
        rows = [tuple(r) for r in ws.iter_rows(values_only=True)]
        title = ws.title
        wb.close()
        return title, rows

    return _read
