from .settings import (
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SPLIT_OUTPUT_FILE,
    LOG_FORMAT,
    MAX_ERRORS_SHOWN,
    MAX_WARNINGS_SHOWN,
    OUTPUT_SHEET_NAME,
    PROGRESS_EVERY,
    STRICT_MODE,
)

__all__ = [
    "DEFAULT_INPUT_FILE",
    "DEFAULT_OUTPUT_FILE",
    "DEFAULT_SPLIT_OUTPUT_FILE",
    "LOG_FORMAT",
    "MAX_ERRORS_SHOWN",
    "MAX_WARNINGS_SHOWN",
    "OUTPUT_SHEET_NAME",
    "PROGRESS_EVERY",
    "STRICT_MODE",
]
