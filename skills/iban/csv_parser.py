"""CSV reader for batch IBAN checks."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from utils.iban_validator import IBAN, InvalidIBAN, parse_iban
from utils.logger import logger

IBAN_COLUMN = "iban"
NAME_COLUMN = "name"


@dataclass
class Entry:
    row: int
    name: str
    iban: IBAN

    def __str__(self) -> str:
        label = f"{self.name} " if self.name else ""
        return f"Zeile {self.row}: {label}({self.iban.masked})"


@dataclass
class ParseResult:
    entries: List[Entry] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0 and len(self.entries) > 0


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def parse_csv(path: Union[str, Path]) -> ParseResult:
    """
    Parse a CSV file and validate the IBAN of every row.

    Expected format (UTF-8 or latin-1, comma, semicolon or tab separated):
        name,iban
        Max Mustermann,DE89 3704 0044 0532 0130 00

    The name column is optional.
    """
    result = ParseResult()
    path = Path(path)

    if not path.exists():
        result.errors.append(f"CSV-Datei nicht gefunden: {path}")
        return result

    text = _decode(path.read_bytes())

    sniffer = csv.Sniffer()
    try:
        dialect = sniffer.sniff(text[:2048], delimiters=",;\t")
    except csv.Error:
        dialect = csv.excel

    reader = csv.DictReader(io.StringIO(text), dialect=dialect)

    if reader.fieldnames is None:
        result.errors.append("CSV hat keine Kopfzeile.")
        return result

    fieldnames_lower = {f.strip().lower(): f for f in reader.fieldnames if f}
    if IBAN_COLUMN not in fieldnames_lower:
        result.errors.append(f"CSV fehlt Spalte: {IBAN_COLUMN}.")
        return result

    iban_col = fieldnames_lower[IBAN_COLUMN]
    name_col = fieldnames_lower.get(NAME_COLUMN)

    for row_num, row in enumerate(reader, start=2):
        name = (row.get(name_col) or "").strip() if name_col else ""
        raw_iban = (row.get(iban_col) or "").strip()

        if not raw_iban:
            result.errors.append(f"Zeile {row_num}: Keine IBAN angegeben.")
            continue

        try:
            iban = parse_iban(raw_iban)
        except InvalidIBAN as exc:
            result.errors.append(f"Zeile {row_num}: IBAN ungueltig – {exc}")
            continue

        result.entries.append(Entry(row=row_num, name=name, iban=iban))
        logger.debug("IBAN geladen: Zeile %d -> %s", row_num, iban.canonical)

    if not result.entries and not result.errors:
        result.errors.append("CSV enthaelt keine Eintraege.")

    return result
