"""
Locale-aware numeric parsing.

Source spreadsheets write prices and stock the Brazilian way: "." groups thousands
and "," marks decimals ("1.234,56"). NumberFormat captures that convention so an
alternate locale can be swapped in without touching the extraction code.

This is a format assumption, not a general-purpose parser: a dot-decimal string
such as "10.5" is read as 105 under the default format.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class NumberFormat:
    thousands_sep: str = "."
    decimal_sep: str = ","


BRAZILIAN = NumberFormat()
DOT_DECIMAL = NumberFormat(thousands_sep=",", decimal_sep=".")


def parse_number(
    value: Any,
    default: Optional[Number] = None,
    fmt: NumberFormat = BRAZILIAN,
) -> Optional[Number]:
    """
    Parse a cell value into a number, returning `default` when that is not possible.

    - None / blank -> default
    - int / float -> returned as-is (NaN and infinities -> default)
    - str -> thousands separators removed, first decimal separator turned into "."
    Never raises.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else default

    s = str(value).strip()
    if not s:
        return default

    if fmt.thousands_sep:
        s = s.replace(fmt.thousands_sep, "")
    if fmt.decimal_sep and fmt.decimal_sep != ".":
        s = s.replace(fmt.decimal_sep, ".", 1)

    try:
        parsed = float(s)
    except ValueError:
        return default

    return parsed if math.isfinite(parsed) else default
