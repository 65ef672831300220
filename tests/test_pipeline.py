"""
End-to-end conversion over in-memory rows.
"""

from domain.canonical import CanonicalField
from domain.schemas import OUTPUT_HEADERS
from extraction.pipeline import convert_rows


def test_code_with_embedded_description():
    result = convert_rows([{"Código": "123 Parafuso Phillips", "Preço Varejo": "10,50"}])

    assert result.succeeded == 1
    assert result.failed == 0
    rec = result.records[0]
    assert list(rec) == OUTPUT_HEADERS
    assert rec["ID"] == 1
    assert rec["Código"] == "123"
    assert rec["Descrição"] == "Parafuso Phillips"
    assert rec["Preço"] == 10.5
    assert rec["Fornecedor"] == ""
    assert rec["Valor IPI fixo"] is None
    assert result.column_map[CanonicalField.RETAIL_PRICE] == "Preço Varejo"
    assert result.inferred_descriptions == 1


def test_strict_mode_excludes_row_without_code():
    result = convert_rows([{"Código": "", "Descrição": "Sem código"}], strict=True)
    assert result.records == []
    assert result.failed == 1
    assert result.failures[0].row_number == 1


def test_counts_add_up_and_ids_keep_source_position():
    rows = [
        {"Código": "A1", "Descrição": "Arruela"},
        {"Código": "", "Descrição": "Sem código"},
        {"Código": "A3", "Descrição": "Porca"},
    ]
    result = convert_rows(rows, strict=True)
    assert result.succeeded + result.failed == len(rows)
    assert [r["ID"] for r in result.records] == [1, 3]


def test_longest_free_text_becomes_description():
    rows = [{"Código": "X1", "Coluna A": "AB", "Coluna B": "Blue Widget"}]
    result = convert_rows(rows)
    assert result.records[0]["Descrição"] == "Blue Widget"
    assert result.descriptions_by_source["scan"] == 1


def test_placeholder_rows_are_reported():
    rows = [{"Código": "", "Estoque": 3}, {"Código": "B2", "Estoque": 1}]
    result = convert_rows(rows)
    assert [r["Descrição"] for r in result.records] == ["Produto 1", "Produto 2"]
    assert [(p.row_number, p.code) for p in result.placeholder_rows] == [(1, "Item #1"), (2, "B2")]
    assert result.inferred_descriptions == 2


def test_invalid_row_is_isolated():
    rows = [{"Código": "A1", "Descrição": "Arruela"}, None, {"Código": "A3", "Descrição": "Porca"}]
    result = convert_rows(rows)
    assert result.succeeded == 2
    assert result.failures[0].row_number == 2


def test_empty_input():
    result = convert_rows([])
    assert result.records == []
    assert result.failed == 0


def test_tax_classification_text_does_not_become_description():
    result = convert_rows([{"Código": "123 Parafuso Phillips", "Classificação Fiscal": "Isento"}])
    rec = result.records[0]
    assert rec["Descrição"] == "Parafuso Phillips"
    assert rec["Código"] == "123"
    assert rec["NCM"] == "Isento"
