"""
Map an ExtractedRecord onto the fixed output schema (domain.schemas).

Every output column is always present: columns with no source in the input get
their schema default ("" or None). Wholesale/promo prices are folded into
"Observações" and the second address/pending note into "Informações Adicionais".

In strict mode the code is mandatory and a row without one raises
RequiredFieldMissing; the pipeline records it as a failed row.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from domain.canonical import ExtractedRecord, OutputRecord
from domain.schemas import empty_output_record


class RowConversionError(ValueError):
    """Raised when a single row cannot be converted; the run continues without it."""

    def __init__(self, message: str, row_number: int | None = None):
        super().__init__(message)
        self.row_number = row_number


class RequiredFieldMissing(RowConversionError):
    """Raised in strict mode when a mandatory output field is empty."""

    def __init__(self, field: str, row_number: int | None = None):
        super().__init__(f"Field {field} is required", row_number=row_number)
        self.field = field


def _labelled_notes(parts: Iterable[Tuple[str, str]]) -> str:
    """Concatenate 'Label: value; ' for each non-empty value, in order."""
    return "".join(f"{label}: {value}; " for label, value in parts if value)


def build_observations(extracted: ExtractedRecord) -> str:
    return _labelled_notes(
        [
            ("Preço atacado", extracted.get("wholesale_price", "")),
            ("Preço promoção", extracted.get("promo_price", "")),
        ]
    )


def build_additional_info(extracted: ExtractedRecord) -> str:
    return _labelled_notes(
        [
            ("Endereço 2", extracted.get("address2", "")),
            ("Pendência", extracted.get("pending", "")),
        ]
    )


def map_record(extracted: ExtractedRecord, row_index: int, strict: bool = False) -> OutputRecord:
    """Build the full output row for one extracted record."""
    code = extracted.get("code", "")
    if strict and not code:
        raise RequiredFieldMissing("Código", row_number=row_index + 1)

    out = empty_output_record()
    out.update(
        {
            "ID": row_index + 1,
            "Código": code,
            "Descrição": extracted.get("description", ""),
            "Unidade": extracted.get("unit", ""),
            "NCM": extracted.get("tax_classification", ""),
            "Preço": extracted.get("retail_price", 0),
            "Observações": build_observations(extracted),
            "Estoque": extracted.get("stock", 0),
            "Preço de custo": extracted.get("purchase_price", 0),
            "Cód no fornecedor": extracted.get("original_code", ""),
            "Fornecedor": extracted.get("supplier", ""),
            "Localização": extracted.get("address", ""),
            "Grupo de produtos": extracted.get("product_line", ""),
            "Meses Garantia no Fornecedor": extracted.get("warranty", ""),
            "Departamento": extracted.get("group", ""),
            "Preço de compra": extracted.get("purchase_price", 0),
            "Informações Adicionais": build_additional_info(extracted),
        }
    )
    return out
