"""IBAN skill – registriert alle IBAN-Tools beim MCP Server."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP


def register_tools(mcp: "FastMCP") -> None:
    """Register all IBAN tools with the given FastMCP instance."""
    from skills.iban.csv_checker import check_csv
    from utils.iban_validator import COUNTRY_LENGTHS, ValidationStatus, check_iban, supported_countries

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_validate(iban: str) -> str:
        """
        Prüft eine IBAN (Länge pro Land + MOD-97 Prüfsumme, ISO 13616).

        Args:
            iban: Die IBAN ohne Leerzeichen (z.B. "DE89370400440532013000").
        """
        result = check_iban(iban)
        line = f"{result.masked}: {result.status.value}"
        if result.error:
            line += f" – {result.error}"
        return line

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_check_csv(csv_path: str) -> str:
        """
        Prüft alle IBANs einer CSV-Datei und gibt einen Bericht zurück.

        Args:
            csv_path: Absoluter Pfad zur CSV-Datei (Spalte "iban", optional "name").
        """
        result = check_csv(csv_path)
        if result.errors and not result.rows:
            return "CSV-Fehler:\n" + "\n".join(result.errors)

        lines = [f"{'Zeile':>5}  {'Name':<25} {'IBAN':<30} Status"]
        lines.append("-" * 75)
        for row in result.rows:
            status = row.result.status.value
            if row.result.error:
                status += f" ({row.result.error})"
            lines.append(f"{row.row_num:>5}  {row.name or '-':<25} {row.result.masked:<30} {status}")

        lines.append("")
        lines.append(f"Gueltig:     {result.count(ValidationStatus.VALID)}")
        lines.append(f"Ungueltig:   {result.count(ValidationStatus.INVALID)}")
        lines.append(f"Fehlerhaft:  {result.count(ValidationStatus.MALFORMED)}")
        lines.append("Ergebnis:    " + ("alle IBANs gueltig" if result.all_valid else "Pruefung fehlgeschlagen"))
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_supported_countries() -> str:
        """Listet die unterstützten Ländercodes mit der erwarteten IBAN-Länge auf."""
        return "\n".join(f"{cc}: {COUNTRY_LENGTHS[cc]}" for cc in supported_countries())
