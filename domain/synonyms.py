"""
Header synonym tables.

Each canonical field maps to an ordered list of header spellings seen in source
spreadsheets (first = highest priority). Matching is exact first, then accent-
and case-insensitive (see extraction.column_resolver). New aliases are added here,
never as branches in code.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .canonical import CanonicalField

COLUMN_SYNONYMS: Dict[CanonicalField, List[str]] = {
    CanonicalField.CATALOG: ["Catálogo", "Catalogo"],
    CanonicalField.CODE: ["Código", "Codigo"],
    CanonicalField.DESCRIPTION: ["Descrição", "Descricao", "Descr"],
    CanonicalField.UNIT: ["Unidade"],
    CanonicalField.TAX_CLASSIFICATION: ["NCM", "Classificação Fiscal", "Classificacao Fiscal"],
    CanonicalField.RETAIL_PRICE: ["Preço Varejo", "Preco Varejo"],
    CanonicalField.WHOLESALE_PRICE: ["Preço Atacado", "Preco Atacado"],
    CanonicalField.PROMO_PRICE: ["Preço Promoção", "Preco Promocao"],
    CanonicalField.STOCK: ["Saldo Estoque", "Estoque"],
    CanonicalField.PURCHASE_PRICE: ["Preço Compra", "Preco Compra"],
    CanonicalField.ORIGINAL_CODE: ["Código Original", "Codigo Original"],
    CanonicalField.SUPPLIER: ["Fornecedor"],
    CanonicalField.ADDRESS: ["Endereço", "Endereco"],
    CanonicalField.ADDRESS2: ["Endereço 2", "Endereco 2"],
    CanonicalField.WARRANTY: ["Garantia"],
    CanonicalField.PENDING: ["Pendência", "Pendencia"],
    CanonicalField.PRODUCT_LINE: ["Linha"],
    CanonicalField.GROUP: ["Grupo"],
}

# Headers that commonly carry a product name when no description column exists
DESCRIPTION_SYNONYMS: List[str] = [
    "Descrição",
    "Descricao",
    "Descr",
    "Desc",
    "Description",
    "Nome",
    "Nome do Produto",
    "Produto",
    "Denominação",
    "Denominacao",
]

# Normalized header fragments that rule a column out of the free-text scan
DESCRIPTION_EXCLUDED_TOKENS: Tuple[str, ...] = (
    "codigo",
    "code",
    "preco",
    "price",
    "valor",
    "value",
    "ncm",
    "classificacao fiscal",
    "unidade",
    "unit",
)

# Normalized header fragments that hint at a description column (diagnostics only)
DESCRIPTION_NAME_HINTS: Tuple[str, ...] = ("descr", "desc", "nome", "produto", "denominacao")

CODE_COLUMN_CANDIDATES: List[str] = ["Código", "Codigo", "código", "codigo", "COD", "CODIGO"]
