from __future__ import annotations

from pathlib import Path

from skills.iban.csv_parser import parse_csv


def _write(path: Path, text: str, encoding: str = "utf-8") -> Path:
    path.write_bytes(text.encode(encoding))
    return path


def test_parse_csv_semicolon_with_names(tmp_path: Path) -> None:
    csv_path = _write(
        tmp_path / "ibans.csv",
        "Name;IBAN\n"
        "Max Mustermann;DE89 3704 0044 0532 0130 00\n"
        "Erika Muster;LU28 0019 4006 4475 0000\n",
    )
    result = parse_csv(csv_path)
    assert result.errors == []
    assert result.valid
    assert [e.row for e in result.entries] == [2, 3]
    assert result.entries[0].name == "Max Mustermann"
    assert result.entries[0].iban.bank_code == "37040044"
    assert result.entries[1].iban.canonical == "LU280019400644750000"
    assert str(result.entries[1]) == "Zeile 3: Erika Muster (LU28************0000)"


def test_parse_csv_collects_row_errors(tmp_path: Path) -> None:
    csv_path = _write(
        tmp_path / "ibans.csv",
        "name,iban\n"
        "A,GB29NWBK60161331926819\n"
        "B,LU12 3456 7890 1234 5678\n"
        "C,\n"
        "D,ZZ68539007547034000\n",
    )
    result = parse_csv(csv_path)
    assert len(result.entries) == 1
    assert not result.valid
    assert len(result.errors) == 3
    assert result.errors[0].startswith("Zeile 3:")
    assert result.errors[1] == "Zeile 4: Keine IBAN angegeben."
    assert "country <ZZ> is not in the list" in result.errors[2]


def test_parse_csv_without_name_column_and_bom(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "ibans.csv", "iban\nES9121000418450200051332\n", encoding="utf-8-sig")
    result = parse_csv(csv_path)
    assert result.errors == []
    assert result.entries[0].name == ""
    assert str(result.entries[0]) == "Zeile 2: (ES91****************1332)"


def test_parse_csv_latin1(tmp_path: Path) -> None:
    csv_path = _write(
        tmp_path / "ibans.csv", "name;iban\nJürgen Müller;AT611904300234573201\n", encoding="latin-1"
    )
    result = parse_csv(csv_path)
    assert result.errors == []
    assert result.entries[0].name == "Jürgen Müller"


def test_parse_csv_missing_file(tmp_path: Path) -> None:
    result = parse_csv(tmp_path / "missing.csv")
    assert result.entries == []
    assert result.errors[0].startswith("CSV-Datei nicht gefunden")


def test_parse_csv_missing_iban_column(tmp_path: Path) -> None:
    csv_path = _write(tmp_path / "ibans.csv", "name;konto\nMax;123\n")
    result = parse_csv(csv_path)
    assert result.errors == ["CSV fehlt Spalte: iban."]


def test_parse_csv_empty_file(tmp_path: Path) -> None:
    result = parse_csv(_write(tmp_path / "empty.csv", ""))
    assert result.errors == ["CSV hat keine Kopfzeile."]


def test_parse_csv_header_only(tmp_path: Path) -> None:
    result = parse_csv(_write(tmp_path / "header.csv", "name;iban\n"))
    assert result.errors == ["CSV enthaelt keine Eintraege."]
