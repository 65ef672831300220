from .excel_writer import OutputWriteError, write_output, write_rows_to_csv, write_rows_to_xlsx

__all__ = ["OutputWriteError", "write_output", "write_rows_to_csv", "write_rows_to_xlsx"]
