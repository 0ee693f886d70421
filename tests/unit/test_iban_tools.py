from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

import pytest

from skills.iban import register_tools


class _FakeMCP:
    """Collects the functions registered via ``@mcp.tool()``."""

    def __init__(self) -> None:
        self.tools: Dict[str, Callable] = {}

    def tool(self):
        def _decorator(fn: Callable) -> Callable:
            self.tools[fn.__name__] = fn
            return fn
        return _decorator


@pytest.fixture
def tools() -> Dict[str, Callable]:
    mcp = _FakeMCP()
    register_tools(mcp)
    return mcp.tools


def test_registers_all_tools(tools) -> None:
    assert set(tools) == {"iban_validate", "iban_check_csv", "iban_supported_countries"}


def test_iban_validate_valid(tools) -> None:
    assert tools["iban_validate"]("DE89370400440532013000") == "DE89**************3000: valid"


def test_iban_validate_invalid_has_reason(tools) -> None:
    out = tools["iban_validate"]("XX22790200760027913168")
    assert out.startswith("XX22**************3168: invalid")
    assert "Unsupported country code" in out


def test_iban_validate_malformed(tools) -> None:
    assert ": malformed" in tools["iban_validate"]("DE89370400440532#13000")


def test_iban_check_csv_report(tools, tmp_path: Path) -> None:
    p = tmp_path / "ibans.csv"
    p.write_text("name,iban\nMax,DE89370400440532013000\nEva,DE227902007600279131\n", encoding="utf-8")
    out = tools["iban_check_csv"](str(p))
    assert "Max" in out and "Eva" in out
    assert "Gueltig:     1" in out
    assert "Ungueltig:   1" in out
    assert "Fehlerhaft:  0" in out
    assert "Pruefung fehlgeschlagen" in out


def test_iban_check_csv_all_valid(tools, tmp_path: Path) -> None:
    p = tmp_path / "ibans.csv"
    p.write_text("name,iban\nMax,DE89370400440532013000\nAnna,AT611904300234573201\n", encoding="utf-8")
    out = tools["iban_check_csv"](str(p))
    assert out.endswith("Ergebnis:    alle IBANs gueltig")


def test_iban_check_csv_file_error(tools, tmp_path: Path) -> None:
    out = tools["iban_check_csv"](str(tmp_path / "missing.csv"))
    assert out.startswith("CSV-Fehler:")


def test_iban_supported_countries(tools) -> None:
    out = tools["iban_supported_countries"]()
    assert out.splitlines() == ["AT: 20", "BE: 16", "CZ: 24", "DE: 22", "DK: 18", "FR: 27"]
