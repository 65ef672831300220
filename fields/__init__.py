from .normalization import has_letter, is_blank, normalize_header, to_text
from .numbers import BRAZILIAN, DOT_DECIMAL, NumberFormat, parse_number

__all__ = [
    "BRAZILIAN",
    "DOT_DECIMAL",
    "NumberFormat",
    "has_letter",
    "is_blank",
    "normalize_header",
    "parse_number",
    "to_text",
]
