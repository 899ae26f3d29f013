from __future__ import annotations

from pathlib import Path


def test_registers_all_tools(iban_tools: dict) -> None:
    assert set(iban_tools) == {
        "iban_parse",
        "iban_check",
        "iban_checksum",
        "iban_countries",
        "iban_check_csv",
    }


def test_iban_parse(iban_tools: dict) -> None:
    out = iban_tools["iban_parse"]("LU28 0019 4006 4475 0000")
    assert "IBAN:          LU28 0019 4006 4475 0000" in out
    assert "Land:          LU (Luxembourg)" in out
    assert "Bankleitzahl:  001" in out
    assert "Filiale:       -" in out
    assert "Kontonummer:   9400644750000" in out


def test_iban_parse_invalid(iban_tools: dict) -> None:
    assert iban_tools["iban_parse"]("LU12 3456 7890 1234 5678") == "IBAN ungueltig: Invalid IBAN number received"


def test_iban_check(iban_tools: dict) -> None:
    check = iban_tools["iban_check"]
    assert check("es9121000418450200051332") == "IBAN gueltig: ES91 2100 0418 4502 0005 1332"
    assert check("LU12 3456 7890 1234 5678") == "IBAN ungueltig: Pruefsumme (MOD-97) stimmt nicht."
    assert "country <ZZ> is not in the list" in check("ZZ68539007547034000")


def test_iban_checksum(iban_tools: dict) -> None:
    checksum = iban_tools["iban_checksum"]
    assert checksum("LU00 0019 4006 4475 0000") == "Pruefziffern: 28"
    assert checksum("SA0080000000608010167519") == "Pruefziffern: 03"
    assert checksum("LU280019").startswith("Pruefziffern nicht berechenbar:")


def test_iban_countries(iban_tools: dict) -> None:
    countries = iban_tools["iban_countries"]
    single = countries("de")
    assert "DE   Germany" in single
    assert "DEkk bbbb bbbb cccc cccc cc" in single
    assert countries("zz") == "Land nicht unterstuetzt: zz"
    assert "LU   Luxembourg" in countries()


def test_iban_check_csv(iban_tools: dict, tmp_path: Path) -> None:
    csv_path = tmp_path / "ibans.csv"
    csv_path.write_text("name;iban\nMax;DE89370400440532013000\nEva;LU12 3456 7890 1234 5678\n", encoding="utf-8")
    out = iban_tools["iban_check_csv"](str(csv_path))
    assert "Fehler:" in out
    assert "Zeile 3: IBAN ungueltig" in out
    assert "1 gueltige IBANs:" in out
    assert "Zeile 2: Max (DE89**************3000)" in out
    assert out.endswith("Nicht alle IBANs gueltig.")


def test_iban_check_csv_all_valid(iban_tools: dict, tmp_path: Path) -> None:
    csv_path = tmp_path / "ibans.csv"
    csv_path.write_text("name;iban\nMax;DE89370400440532013000\nEva;LU280019400644750000\n", encoding="utf-8")
    out = iban_tools["iban_check_csv"](str(csv_path))
    assert "Fehler:" not in out
    assert "2 gueltige IBANs:" in out
    assert out.endswith("Alle IBANs gueltig.")
