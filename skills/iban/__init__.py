"""IBAN skill – registriert alle IBAN-Tools beim MCP Server."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP


def register_tools(mcp: "FastMCP") -> None:
    """Register all IBAN tools with the given FastMCP instance."""
    from skills.iban.csv_parser import parse_csv
    from utils.iban_countries import COUNTRIES, lookup
    from utils.iban_validator import InvalidIBAN, compute_checksum, is_valid_iban, parse_iban
    from utils.logger import logger

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_parse(iban: str) -> str:
        """
        Prüft eine IBAN und zerlegt sie in ihre Bestandteile.

        Args:
            iban: IBAN, mit oder ohne Leerzeichen (z.B. "DE89 3704 0044 0532 0130 00").
        """
        try:
            result = parse_iban(iban)
        except InvalidIBAN as exc:
            return f"IBAN ungueltig: {exc}"

        logger.info("IBAN zerlegt: %s", result.canonical)
        lines = [
            f"IBAN:          {result.formatted}",
            f"Land:          {result.country_code} ({lookup(result.country_code).name})",
            f"Pruefziffer:   {result.checksum}",
            f"BBAN:          {result.bban}",
            f"Bankleitzahl:  {result.bank_code or '-'}",
            f"Filiale:       {result.branch_code or '-'}",
            f"Kontonummer:   {result.account_number or '-'}",
        ]
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_check(iban: str) -> str:
        """
        Prüft nur die Gültigkeit einer IBAN (Länge, Land, MOD-97-Prüfsumme).

        Args:
            iban: IBAN, mit oder ohne Leerzeichen.
        """
        valid, formatted, error = is_valid_iban(iban)
        if valid:
            return f"IBAN gueltig: {formatted}"
        if error is not None:
            return f"IBAN ungueltig: {error}"
        return "IBAN ungueltig: Pruefsumme (MOD-97) stimmt nicht."

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_checksum(iban: str) -> str:
        """
        Berechnet die korrekten Prüfziffern (Stellen 3-4) einer IBAN.

        Die angegebenen Prüfziffern werden ignoriert, z.B. "DE00 3704 0044 0532 0130 00".

        Args:
            iban: IBAN mit beliebigen Prüfziffern (mindestens 16 Zeichen).
        """
        try:
            checksum = compute_checksum(iban)
        except InvalidIBAN as exc:
            return f"Pruefziffern nicht berechenbar: {exc}"
        return f"Pruefziffern: {checksum:02d}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_countries(country: Optional[str] = None) -> str:
        """
        Listet die unterstützten Länder mit IBAN-Länge und Feldaufbau.

        Feldaufbau: b = Bankleitzahl, s = Filiale, c = Kontonummer.

        Args:
            country: Zweistelliger Ländercode (z.B. "DE"). Ohne Angabe: alle Länder.
        """
        if country:
            layout = lookup(country.strip().upper())
            if layout is None:
                return f"Land nicht unterstuetzt: {country}"
            layouts = [layout]
        else:
            layouts = list(COUNTRIES.values())

        lines = [f"{'Land':<4} {'Name':<25} {'Laenge':>6}  Aufbau"]
        lines.append("-" * 75)
        for layout in layouts:
            lines.append(f"{layout.code:<4} {layout.name:<25} {layout.length:>6}  {layout.fields}")
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_check_csv(csv_path: str) -> str:
        """
        Prüft alle IBANs einer CSV-Datei.

        Args:
            csv_path: Absoluter Pfad zur CSV-Datei (Spalten: iban, optional name).
        """
        result = parse_csv(csv_path)
        lines = []
        if result.errors:
            lines.append("Fehler:")
            lines.extend(f"  {e}" for e in result.errors)
        lines.append(f"\n{len(result.entries)} gueltige IBANs:")
        for entry in result.entries:
            lines.append(f"  {entry}")
        lines.append("\nAlle IBANs gueltig." if result.valid else "\nNicht alle IBANs gueltig.")
        logger.info(
            "CSV geprueft: %d gueltig, %d Fehler", len(result.entries), len(result.errors)
        )
        return "\n".join(lines)
