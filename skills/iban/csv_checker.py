"""Batch IBAN check for CSV files."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from utils.iban_validator import ValidationResult, ValidationStatus, check_iban
from utils.logger import logger

IBAN_COLUMN = "iban"
NAME_COLUMN = "name"


@dataclass
class CheckedIban:
    row_num: int
    name: str
    result: ValidationResult

    def __str__(self) -> str:
        label = f"{self.name} " if self.name else ""
        return f"{label}({self.result.masked})"


@dataclass
class CheckResult:
    rows: List[CheckedIban] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def count(self, status: ValidationStatus) -> int:
        return sum(1 for r in self.rows if r.result.status is status)

    @property
    def all_valid(self) -> bool:
        return not self.errors and bool(self.rows) and all(r.result.valid for r in self.rows)


def check_csv(path: Union[str, Path]) -> CheckResult:
    """
    Check every IBAN in a CSV file.

    Expected format (UTF-8 or latin-1, comma, semicolon or tab separated):
        name,iban
        Max Mustermann,DE89370400440532013000

    The ``name`` column is optional. Cell values are trimmed at the edges;
    the IBAN itself is passed on unchanged.
    """
    result = CheckResult()
    path = Path(path)

    if not path.exists():
        result.errors.append(f"CSV file not found: {path}")
        return result

    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = raw.decode("latin-1")

    sniffer = csv.Sniffer()
    try:
        dialect = sniffer.sniff(text[:2048], delimiters=",;\t")
    except csv.Error:
        dialect = csv.excel

    reader = csv.DictReader(io.StringIO(text), dialect=dialect)

    if reader.fieldnames is None:
        result.errors.append("CSV has no header row.")
        return result

    fieldnames_lower = {f.strip().lower(): f for f in reader.fieldnames if f}
    if IBAN_COLUMN not in fieldnames_lower:
        result.errors.append(f"CSV is missing the '{IBAN_COLUMN}' column.")
        return result

    iban_col = fieldnames_lower[IBAN_COLUMN]
    name_col = fieldnames_lower.get(NAME_COLUMN)

    for row_num, row in enumerate(reader, start=2):
        iban = (row.get(iban_col) or "").strip()
        name = (row.get(name_col) or "").strip() if name_col else ""
        checked = CheckedIban(row_num=row_num, name=name, result=check_iban(iban))
        result.rows.append(checked)
        logger.debug("Row %d: %s -> %s", row_num, checked, checked.result.status.value)

    if not result.rows:
        result.errors.append("CSV contains no data rows.")

    return result
