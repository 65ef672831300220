"""
Text normalization helpers shared by the resolver and the extractor.
"""

from __future__ import annotations

import math
import unicodedata
from typing import Any


def normalize_header(text: Any) -> str:
    """Strip accents, lower-case and trim (internal whitespace is kept as-is)."""
    if text is None:
        return ""
    decomposed = unicodedata.normalize("NFD", str(text))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower().strip()


def is_blank(value: Any) -> bool:
    """True for None, NaN and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def to_text(value: Any) -> str:
    """Coerce a cell value to trimmed text; integral floats lose their '.0'."""
    if is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def has_letter(text: str) -> bool:
    return any(ch.isalpha() for ch in text)
