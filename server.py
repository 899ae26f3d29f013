"""
ibanMCP – MCP Server für IBAN-Prüfung und -Zerlegung.

Startet einen FastMCP Server (stdio) und registriert alle Skills.

Skills:
  iban  – IBAN-Prüfung (MOD-97), Zerlegung in Bank/Filiale/Konto, Prüfziffern, CSV-Prüfung

Verwendung:
  python server.py                        # startet den MCP Server
  claude mcp add ibanMCP -- python /pfad/zu/server.py

Konfiguration:
  Optional: .env im Projektverzeichnis (IBANMCP_LOG_DIR, IBANMCP_LOG_LEVEL).
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

# .env aus dem Projektverzeichnis laden (vor allen Skill-Imports)
load_dotenv(Path(__file__).parent / ".env", override=False)

mcp = FastMCP(
    "ibanMCP",
    instructions=(
        "MCP Server für IBAN-Prüfung. "
        "Verfügbare Skills: iban (Prüfung, Zerlegung, Prüfziffern, CSV-Prüfung). "
        "Alle Pfadangaben müssen absolute Pfade sein."
    ),
)

# ── Skills registrieren ────────────────────────────────────────────────
from skills.iban import register_tools as _iban  # noqa: E402

_iban(mcp)

# ── Einstiegspunkt ─────────────────────────────────────────────────────
if __name__ == "__main__":
    mcp.run()
