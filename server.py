"""
ibanCheck – MCP Server für die IBAN-Prüfung (ISO 13616, MOD-97).

Verwendung:
  ibancheck-server                        # nach `pip install -e .`
  python server.py
  claude mcp add ibanCheck -- ibancheck-server

Konfiguration (optional, .env im Projektverzeichnis):
  IBANCHECK_LOG_DIR    – Log-Verzeichnis (Standard: ~/.ibanCheck/logs)
  IBANCHECK_LOG_LEVEL  – Log-Level der Konsole (Standard: INFO)
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

ENV_FILE = Path(__file__).parent / ".env"


def build_server() -> FastMCP:
    """Create the FastMCP instance with every IBAN tool registered."""
    # .env must be loaded before utils.logger is first imported
    load_dotenv(ENV_FILE, override=False)

    from skills.iban import register_tools
    from utils.iban_validator import supported_countries
    from utils.logger import logger

    server = FastMCP(
        "ibanCheck",
        instructions=(
            "Prüft IBANs auf Länge pro Land und MOD-97 Prüfsumme. "
            f"Unterstützte Länder: {', '.join(supported_countries())}. "
            "IBANs ohne Leerzeichen übergeben; CSV-Pfade müssen absolut sein."
        ),
    )
    register_tools(server)
    logger.debug("MCP server ready (env file: %s)", ENV_FILE)
    return server


def main() -> None:
    build_server().run()


if __name__ == "__main__":
    main()
