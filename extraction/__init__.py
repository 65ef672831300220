from .code_splitter import SplitResult, split_code_column
from .column_resolver import collect_headers, diagnose_columns, find_column, resolve
from .field_extractor import extract
from .pipeline import ConversionResult, RowFailure, convert_rows
from .record_mapper import RequiredFieldMissing, RowConversionError, map_record

__all__ = [
    "ConversionResult",
    "RequiredFieldMissing",
    "RowConversionError",
    "RowFailure",
    "SplitResult",
    "collect_headers",
    "convert_rows",
    "diagnose_columns",
    "extract",
    "find_column",
    "map_record",
    "resolve",
    "split_code_column",
]
