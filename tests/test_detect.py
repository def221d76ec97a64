from statement_import.statement.detect import (
    decode_statement_bytes,
    detect_format,
    parse_statement,
    parse_statement_bytes,
    sniff_delimiter,
)

OFX = "OFXHEADER:100\n<OFX>\n<STMTTRN>\n<DTPOSTED>20240115\n<TRNAMT>-45.90\n<NAME>SUPERMERCADO ABC\n</STMTTRN>\n</OFX>\n"


def test_detect_by_extension_and_markers():
    assert detect_format("extrato.OFX", "") == "OFX"
    assert detect_format("extrato.csv", OFX) == "OFX"
    assert detect_format("extrato.csv", "Data;Valor") == "CSV"
    assert detect_format("extrato.txt", "Data;Valor") == "CSV"
    assert detect_format("download", OFX) == "OFX"
    assert detect_format("download", "Data;Valor") == "CSV"


def test_sniff_delimiter_uses_first_line():
    assert sniff_delimiter("Data;Valor\n1,2") == ";"
    assert sniff_delimiter("Data,Valor\n1;2") == ","


def test_parse_statement_sets_file_name_for_ofx():
    r = parse_statement("Extrato.ofx", OFX)

    assert r.success
    assert r.file_name == "Extrato.ofx"
    assert r.file_type == "OFX"
    assert r.transactions[0].date == "2024-01-15"


def test_parse_statement_csv_with_sniffed_comma():
    r = parse_statement("extrato.csv", "date,amount,memo\n2024-01-15,-45.90,Mercado\n")

    assert r.success
    assert r.file_type == "CSV"
    assert r.transactions[0].amount == 45.90
    assert r.transactions[0].type == "expense"


def test_unknown_extension_uses_default_delimiter():
    content = "Data;Valor\n15/01/2024;-1,00"

    assert parse_statement("download", content).success
    assert not parse_statement("download", content, default_delimiter=",").success


def test_explicit_delimiter_overrides_sniffing():
    content = "Data|Valor;x\n15/01/2024|-1,00"
    r = parse_statement("extrato.csv", content, delimiter="|")

    assert r.success
    assert r.transactions[0].amount == 1.0


def test_failures_never_raise(monkeypatch):
    import statement_import.statement.detect as detect

    def boom(content):
        raise RuntimeError("kaput")

    monkeypatch.setattr(detect, "parse_ofx", boom)

    r = detect.parse_statement("x.ofx", OFX)
    assert not r.success
    assert r.file_name == "x.ofx"
    assert r.errors == ("Erro ao processar arquivo: kaput",)


def test_decode_bytes_utf8_bom_and_cp1252():
    assert decode_statement_bytes("\ufeffData;Valor".encode("utf-8")) == "Data;Valor"
    assert decode_statement_bytes("Descrição".encode("cp1252")) == "Descrição"


def test_parse_statement_bytes_latin_ofx():
    data = OFX.replace("SUPERMERCADO ABC", "AÇOUGUE SÃO JOSÉ").encode("cp1252")
    r = parse_statement_bytes("extrato.ofx", data)

    assert r.transactions[0].description == "AÇOUGUE SÃO JOSÉ"
