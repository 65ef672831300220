"""
Header resolution: exact match first, then accent/case-insensitive, trim only.
"""

from domain.canonical import CanonicalField
from extraction.column_resolver import collect_headers, diagnose_columns, find_column, resolve


def test_exact_candidate_wins_over_normalized():
    headers = ["Codigo", "Código"]
    assert find_column(headers, ["Código", "Codigo"]) == "Código"


def test_accent_and_case_insensitive_match():
    colmap = resolve(["PRECO VAREJO", "descrição", " Fornecedor "])
    assert colmap[CanonicalField.RETAIL_PRICE] == "PRECO VAREJO"
    assert colmap[CanonicalField.DESCRIPTION] == "descrição"
    assert colmap[CanonicalField.SUPPLIER] == " Fornecedor "


def test_internal_spacing_is_not_collapsed():
    colmap = resolve(["Preço  Varejo"])
    assert colmap[CanonicalField.RETAIL_PRICE] is None


def test_unresolved_fields_are_present_as_none():
    colmap = resolve(["Código"])
    assert set(colmap) == set(CanonicalField)
    assert colmap[CanonicalField.CODE] == "Código"
    assert colmap[CanonicalField.GROUP] is None


def test_candidate_priority_order():
    colmap = resolve(["Estoque", "Saldo Estoque"])
    assert colmap[CanonicalField.STOCK] == "Saldo Estoque"


def test_similar_headers_bind_to_distinct_fields():
    colmap = resolve(["Endereço", "Endereço 2"])
    assert colmap[CanonicalField.ADDRESS] == "Endereço"
    assert colmap[CanonicalField.ADDRESS2] == "Endereço 2"


def test_normalized_match_scans_headers_in_order():
    assert find_column(["preco compra", "PRECO COMPRA"], ["Preço Compra", "Preco Compra"]) == "preco compra"


def test_collect_headers_keeps_first_seen_order():
    rows = [{"b": 1, "a": 2}, {"a": 3, "c": 4}]
    assert collect_headers(rows) == ["b", "a", "c"]


def test_diagnose_columns_ranks_description_candidates():
    rows = [
        {"Código": "1", "Nome": "Parafuso sextavado", "Qtd": 3},
        {"Código": "2", "Nome": "", "Qtd": 5},
    ]
    report = diagnose_columns(rows)
    assert report.total_rows == 2
    assert [p.name for p in report.description_candidates] == ["Nome"]
    nome = report.description_candidates[0]
    assert nome.filled == 1
    assert nome.score == 10 + 5 + 5
