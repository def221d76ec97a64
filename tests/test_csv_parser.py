import pytest

from statement_import.statement.csv_dialect import detect_columns, parse_csv


def test_brazilian_row_maps_to_canonical_shape():
    r = parse_csv("Data;Valor;Descrição\n15/01/2024;-45,90;Mercado\n", ";")

    assert r.success
    assert r.file_type == "CSV"
    t = r.transactions[0]
    assert t.date == "2024-01-15"
    assert t.amount == 45.90
    assert t.type == "expense"
    assert t.description == "Mercado"
    assert t.original_line == "15/01/2024;-45,90;Mercado"


def test_keeps_file_order_and_provenance_dates():
    content = "\n".join(
        [
            "data;historico;valor",
            "20/01/2024;PIX RECEBIDO;1.234,56",
            "05/01/2024;FARMACIA;R$ -12,00",
            "2024-01-10;ISO;10,00",
        ]
    )
    r = parse_csv(content)

    assert [t.date for t in r.transactions] == ["2024-01-20", "2024-01-05", "2024-01-10"]
    assert r.transactions[0].amount == 1234.56
    assert r.transactions[0].type == "income"
    assert r.transactions[1].amount == 12.0
    assert r.start_date == "2024-01-20"
    assert r.end_date == "2024-01-10"


def test_single_digit_day_and_month_are_padded():
    r = parse_csv("data;valor\n5/1/2024;1,00")

    assert r.transactions[0].date == "2024-01-05"


def test_non_numeric_amount_rows_are_skipped_silently():
    content = "Data;Valor;Descrição\n15/01/2024;-45,90;Mercado\nSaldo;--;\n16/01/2024;abc;x\n"
    r = parse_csv(content)

    assert len(r.transactions) == 1
    assert r.errors == ()


def test_blank_lines_and_empty_cells_are_skipped():
    content = "Data;Valor\n\n15/01/2024;\n;10,00\n16/01/2024;10,00\n"
    r = parse_csv(content)

    assert len(r.transactions) == 1
    assert r.errors == ()


def test_short_row_is_reported_with_line_number():
    content = "Descrição;Data;Valor\nMercado;15/01/2024;-1,00\nIncompleta\n"
    r = parse_csv(content)

    assert r.success
    assert len(r.transactions) == 1
    assert len(r.errors) == 1
    assert r.errors[0].startswith("Linha 3:")


def test_invalid_date_is_reported():
    r = parse_csv("Data;Valor\n31/02/2024;1,00\n01/03/2024;2,00")

    assert len(r.transactions) == 1
    assert r.errors[0].startswith("Linha 2:")


def test_missing_description_column_uses_placeholder():
    r = parse_csv("date,amount\n2024-01-15,45.90", ",")

    t = r.transactions[0]
    assert t.description == "Transação importada"
    assert t.amount == 45.90
    assert t.type == "income"


def test_too_short_file_fails():
    r = parse_csv("Data;Valor\n")

    assert not r.success
    assert r.transactions == ()
    assert r.errors == ("Arquivo CSV vazio ou inválido",)


def test_unknown_columns_fail():
    r = parse_csv("foo;bar\n1;2\n")

    assert not r.success
    assert r.errors == ("Não foi possível identificar as colunas de data e valor",)


def test_detect_columns_first_match_wins_and_bom_ignored():
    cols = detect_columns("\ufeffData Lançamento;Data Valor;Valor (R$);Histórico;Memo", ";")

    assert cols.date == 0
    assert cols.amount == 1
    assert cols.description == 3


def test_quoted_cells_are_unquoted():
    r = parse_csv('Data,Valor,Descrição\n15/01/2024,"-1.234,56","Loja, Centro"', ",")

    t = r.transactions[0]
    assert t.amount == 1234.56
    assert t.description == "Loja, Centro"


def test_lone_leading_quote_stays_in_description():
    r = parse_csv('Descrição;Data;Valor\n"PIX JOAO;15/01/2024;-1,00\n')

    assert r.errors == ()
    assert len(r.transactions) == 1
    t = r.transactions[0]
    assert t.description == '"PIX JOAO'
    assert t.date == "2024-01-15"
    assert t.amount == 1.0


def test_unicode_line_separator_does_not_split_rows():
    r = parse_csv("Data;Valor;Descrição\n15/01/2024;-1,00;LOJA\u2028X")

    assert r.errors == ()
    assert len(r.transactions) == 1
    assert r.transactions[0].description == "LOJA\u2028X"
    assert r.transactions[0].original_line == "15/01/2024;-1,00;LOJA\u2028X"


def test_dt_only_matches_whole_column_name():
    cols = detect_columns("Valor;Cod Dt Ref;Data", ";")

    assert cols.date == 2
    assert cols.amount == 0

    assert detect_columns("DT;Valor", ";").date == 0


def test_python_only_number_forms_are_not_amounts():
    content = "\n".join(
        [
            "Data;Valor;Descrição",
            "15/01/2024;1_000;A",
            "16/01/2024;1e5;B",
            "17/01/2024;infinity;C",
            "18/01/2024;-2,00;D",
        ]
    )
    r = parse_csv(content)

    assert r.errors == ()
    assert [t.description for t in r.transactions] == ["D"]


def test_result_sequences_are_immutable():
    r = parse_csv("Data;Valor\n15/01/2024;1,00\n15/01/2024;abc\n01/13/2024;1,00\n")

    assert isinstance(r.transactions, tuple)
    assert isinstance(r.errors, tuple)
    assert len(r.errors) == 1
    with pytest.raises(AttributeError):
        r.transactions.clear()
    with pytest.raises(AttributeError):
        r.errors.append("x")
