"""
Canonical field definitions.

CanonicalField enumerates the semantic product attributes the converter targets,
independent of how the source spreadsheet spells its headers. ExtractedRecord is
the normalized per-row structure produced by the field extractor and consumed by
the record mapper; its keys are the CanonicalField values.

Text fields are trimmed strings ("" when absent). retail_price, stock and
purchase_price are already parsed into numbers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, TypedDict


class CanonicalField(str, Enum):
    CATALOG = "catalog"
    CODE = "code"
    DESCRIPTION = "description"
    UNIT = "unit"
    TAX_CLASSIFICATION = "tax_classification"
    RETAIL_PRICE = "retail_price"
    WHOLESALE_PRICE = "wholesale_price"
    PROMO_PRICE = "promo_price"
    STOCK = "stock"
    PURCHASE_PRICE = "purchase_price"
    ORIGINAL_CODE = "original_code"
    SUPPLIER = "supplier"
    ADDRESS = "address"
    ADDRESS2 = "address2"
    WARRANTY = "warranty"
    PENDING = "pending"
    PRODUCT_LINE = "product_line"
    GROUP = "group"


# Fields parsed as numbers by the extractor
NUMERIC_FIELDS = (
    CanonicalField.RETAIL_PRICE,
    CanonicalField.STOCK,
    CanonicalField.PURCHASE_PRICE,
)

RawRow = Dict[str, Any]
ColumnMap = Dict[CanonicalField, Optional[str]]
OutputRecord = Dict[str, Any]


class ExtractedRecord(TypedDict, total=False):
    catalog: str
    code: str
    description: str
    unit: str
    tax_classification: str

    retail_price: Optional[float]
    wholesale_price: str
    promo_price: str
    stock: Optional[float]
    purchase_price: Optional[float]

    original_code: str
    supplier: str
    address: str
    address2: str
    warranty: str
    pending: str
    product_line: str
    group: str

    # Which inference tier produced the description
    description_source: str
