"""
Command line runs against workbooks in tmp_path.
"""

from domain.schemas import OUTPUT_HEADERS
import interface.cli as cli
from interface.cli import main, parse_args, split_main


def test_convert_writes_produtos_sheet(make_xlsx, read_sheet, tmp_path):
    src = make_xlsx(
        "dados_atuais.xlsx",
        ["Código", "Preço Varejo", "Preço Atacado", "Unidade"],
        [
            ["123 Parafuso Phillips", "10,50", "9,00", "UN"],
            ["456", "1.234,56", None, None],
        ],
    )
    out = tmp_path / "dados_convertidos.xlsx"

    assert main([str(src), str(out), "--debug"]) == 0

    title, rows = read_sheet(out)
    assert title == "Produtos"
    assert list(rows[0]) == OUTPUT_HEADERS
    assert len(rows) == 3

    first = dict(zip(OUTPUT_HEADERS, rows[1]))
    assert first["ID"] == 1
    assert first["Código"] == "123"
    assert first["Descrição"] == "Parafuso Phillips"
    assert first["Preço"] == 10.5
    assert first["Observações"] == "Preço atacado: 9,00; "
    assert first["Unidade"] == "UN"

    second = dict(zip(OUTPUT_HEADERS, rows[2]))
    assert second["Preço"] == 1234.56
    assert second["Descrição"] == "Produto 2"


def test_missing_input_writes_nothing(tmp_path):
    out = tmp_path / "out.xlsx"
    assert main([str(tmp_path / "nope.xlsx"), str(out)]) == 1
    assert not out.exists()


def test_all_rows_failing_writes_nothing(make_xlsx, tmp_path):
    src = make_xlsx("in.xlsx", ["Código", "Descrição"], [[None, "Sem código"]])
    out = tmp_path / "out.xlsx"
    assert main([str(src), str(out), "--strict"]) == 1
    assert not out.exists()


def test_no_strict_overrides_environment_default(make_xlsx, tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "STRICT_MODE", True)
    assert parse_args([]).strict is True
    assert parse_args(["--no-strict"]).strict is False

    src = make_xlsx("in.xlsx", ["Código", "Descrição"], [[None, "Sem código"]])
    out = tmp_path / "out.xlsx"
    assert main([str(src), str(out), "--no-strict"]) == 0
    assert out.exists()


def test_strict_flag_enables_when_environment_is_off(monkeypatch):
    monkeypatch.setattr(cli, "STRICT_MODE", False)
    assert parse_args([]).strict is False
    assert parse_args(["--strict"]).strict is True


def test_split_command(make_xlsx, read_sheet, tmp_path):
    src = make_xlsx("in.xlsx", ["Código", "Preço"], [["123 Parafuso", "1,00"], ["456", "2,00"]])
    out = tmp_path / "separados.xlsx"

    assert split_main([str(src), str(out)]) == 0

    title, rows = read_sheet(out)
    assert title == "Produtos"
    assert rows[0] == ("Código", "Preço", "Descrição")
    assert rows[1] == ("123", "1,00", "Parafuso")
    assert rows[2][:2] == ("456", "2,00")
