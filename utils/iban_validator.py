"""IBAN validation using the segmented MOD-97 algorithm (ISO 13616)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping

from utils.logger import logger

# Country code → expected total IBAN length
COUNTRY_LENGTHS: Mapping[str, int] = MappingProxyType({
    "AT": 20, "BE": 16, "CZ": 24,
    "DE": 22, "DK": 18, "FR": 27,
})

SEGMENT_SIZE = 9
EXPECTED_REMAINDER = 1


class IbanError(ValueError):
    """Base class for IBAN errors."""


class MalformedIbanError(IbanError):
    """Raised when a character is neither an ASCII letter nor a digit."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Invalid character {character!r} at position {position}")
        self.character = character
        self.position = position


class ValidationStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ValidationResult:
    status: ValidationStatus
    masked: str
    error: str = ""

    @property
    def valid(self) -> bool:
        return self.status is ValidationStatus.VALID


def supported_countries() -> List[str]:
    return sorted(COUNTRY_LENGTHS)


def mask_iban(iban: str) -> str:
    if len(iban) < 8:
        return iban
    return iban[:4] + "*" * (len(iban) - 8) + iban[-4:]


def _check_length(iban: str) -> bool:
    expected_len = COUNTRY_LENGTHS.get(iban[:2].upper())
    return expected_len is not None and len(iban) == expected_len


def _rearrange(iban: str) -> str:
    return iban[4:] + iban[:4]


def _to_numeric(rearranged: str) -> str:
    """
    Convert letters to two-digit numbers (A=10 … Z=35), digits pass through.

    Raises MalformedIbanError on the first character that is neither an
    ASCII digit nor an ASCII letter; no partial result is returned.
    """
    digits = []
    for pos, ch in enumerate(rearranged):
        if "0" <= ch <= "9":
            digits.append(ch)
        elif ch.isascii() and ch.isalpha():
            digits.append(str(ord(ch.upper()) - ord("A") + 10))
        else:
            raise MalformedIbanError(ch, pos)
    return "".join(digits)


def _segments(numeric: str, size: int = SEGMENT_SIZE) -> List[str]:
    return [numeric[i:i + size] for i in range(0, len(numeric), size)]


def _mod97(segments: List[str]) -> int:
    # str(remainder) + chunk stays at or below 11 digits
    remainder = 0
    for chunk in segments:
        remainder = int(str(remainder) + chunk) % 97
    return remainder


def check_iban(iban: str) -> ValidationResult:
    """
    Validate an IBAN and report why it failed.

    The input is taken as-is: no whitespace stripping, no separator removal.
    Business-rule failures (short input, unknown country, wrong length, bad
    checksum) give INVALID; a character outside [A-Za-z0-9] gives MALFORMED.
    """
    masked = mask_iban(iban)
    if len(iban) < 2:
        logger.debug("IBAN rejected: too short (%d chars)", len(iban))
        return ValidationResult(ValidationStatus.INVALID, masked, "IBAN is too short.")

    country = iban[:2].upper()
    if country not in COUNTRY_LENGTHS:
        logger.debug("IBAN rejected: unsupported country %r", country)
        return ValidationResult(
            ValidationStatus.INVALID, masked, f"Unsupported country code: {iban[:2]}"
        )
    if not _check_length(iban):
        logger.debug("IBAN rejected: wrong length %d for %s", len(iban), country)
        return ValidationResult(
            ValidationStatus.INVALID,
            masked,
            f"Wrong IBAN length for {country}: expected {COUNTRY_LENGTHS[country]}, got {len(iban)}.",
        )

    try:
        numeric = _to_numeric(_rearrange(iban))
    except MalformedIbanError as exc:
        # position in the rearranged string → position in the input
        err = MalformedIbanError(exc.character, (exc.position + 4) % len(iban))
        logger.warning("Malformed IBAN %s: %s", masked, err)
        return ValidationResult(ValidationStatus.MALFORMED, masked, str(err))

    if _mod97(_segments(numeric)) != EXPECTED_REMAINDER:
        logger.debug("IBAN rejected: checksum mismatch for %s", masked)
        return ValidationResult(ValidationStatus.INVALID, masked, "IBAN checksum (MOD-97) is invalid.")
    return ValidationResult(ValidationStatus.VALID, masked)


def validate(iban: str) -> bool:
    """Return True iff *iban* is a valid IBAN for a supported country. Never raises for str input."""
    return check_iban(iban).valid
