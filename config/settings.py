"""
Central configuration for the product spreadsheet converter.

This module defines:
- Default input/output file names used by the command line tools.
- The output sheet name expected by the downstream catalog system.
- Run options that can be overridden from the environment (or a `.env` file):
  CONVERSOR_INPUT_FILE, CONVERSOR_OUTPUT_FILE, CONVERSOR_STRICT.
- Reporting limits for the end-of-run summary.

All values are constants and should be imported where needed.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


DEFAULT_INPUT_FILE = os.getenv("CONVERSOR_INPUT_FILE", "dados_atuais.xlsx")
DEFAULT_OUTPUT_FILE = os.getenv("CONVERSOR_OUTPUT_FILE", "dados_convertidos.xlsx")
DEFAULT_SPLIT_OUTPUT_FILE = "dados_separados.xlsx"

OUTPUT_SHEET_NAME = "Produtos"

# Code is mandatory only in strict mode
STRICT_MODE = _env_flag("CONVERSOR_STRICT")

PROGRESS_EVERY = 100
MAX_ERRORS_SHOWN = 10
MAX_WARNINGS_SHOWN = 20

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
