from .excel import InvalidWorkbookError, read_excel

__all__ = ["InvalidWorkbookError", "read_excel"]
