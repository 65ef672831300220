from .canonical import (
    NUMERIC_FIELDS,
    CanonicalField,
    ColumnMap,
    ExtractedRecord,
    OutputRecord,
    RawRow,
)
from .schemas import NUMERIC_OUTPUT_COLUMNS, OUTPUT_HEADERS, empty_output_record

__all__ = [
    "NUMERIC_FIELDS",
    "NUMERIC_OUTPUT_COLUMNS",
    "OUTPUT_HEADERS",
    "CanonicalField",
    "ColumnMap",
    "ExtractedRecord",
    "OutputRecord",
    "RawRow",
    "empty_output_record",
]
