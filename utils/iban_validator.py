"""IBAN validation and decomposition using MOD-97 (ISO 13616 / ISO 7064)."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Optional, Tuple

from utils.iban_countries import Span, lookup
from utils.logger import logger

MIN_LENGTH = 15

_WHITESPACE_RE = re.compile(r"\s+")
_ALNUM = frozenset(string.digits + string.ascii_uppercase)
_CHUNK = 9


class InvalidIBAN(ValueError):
    """Raised when a string is not a valid IBAN."""

    def __init__(self, message: str = "Invalid IBAN number received") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class IBAN:
    raw: str
    canonical: str
    formatted: str
    country_code: str
    checksum: str
    bban: str
    bank_code: str = ""
    branch_code: str = ""
    account_number: str = ""

    @property
    def masked(self) -> str:
        return mask_iban(self.canonical)

    def to_text(self) -> str:
        return self.canonical

    @classmethod
    def from_text(cls, text: str) -> "IBAN":
        return parse_iban(text)

    def __str__(self) -> str:
        return self.canonical


def normalize_iban(text: str) -> str:
    """Remove all whitespace and upper-case."""
    return _WHITESPACE_RE.sub("", text or "").upper()


def format_iban(canonical: str) -> str:
    """Group a canonical IBAN into blocks of 4 separated by single spaces."""
    return " ".join(canonical[i:i + 4] for i in range(0, len(canonical), 4))


def mask_iban(iban: str) -> str:
    if len(iban) < 8:
        return iban
    return iban[:4] + "*" * (len(iban) - 8) + iban[-4:]


def _split(canonical: str) -> Tuple[str, str, str]:
    return canonical[:2], canonical[2:4], canonical[4:]


def _to_digits(country_code: str, checksum: str, bban: str) -> Optional[str]:
    """Move the first four characters to the end and replace A..Z by 10..35."""
    rearranged = bban + country_code + checksum
    if not rearranged or any(ch not in _ALNUM for ch in rearranged):
        return None
    return "".join(ch if ch.isdigit() else str(ord(ch) - 55) for ch in rearranged)


def mod97(digits: str) -> int:
    """
    Remainder of a long decimal string modulo 97.

    Reduces a prefix of at most 9 digits at a time and puts the remainder back
    in front of the rest, so no intermediate value exceeds 9 digits.
    """
    if not digits or any(ch not in string.digits for ch in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    rest = digits
    while len(rest) > _CHUNK:
        rest = str(int(rest[:_CHUNK]) % 97) + rest[_CHUNK:]
    return int(rest) % 97


def _slice(canonical: str, span: Span) -> str:
    if span is None:
        return ""
    return canonical[span[0]:span[1]]


def is_valid_iban(text: str) -> Tuple[bool, str, Optional[InvalidIBAN]]:
    """
    Check an IBAN against its country configuration and the MOD-97 checksum.

    Returns ``(valid, formatted, error)``. ``error`` is only set for structural
    problems (too short, unknown country, wrong length). A wrong checksum gives
    ``(False, "", None)``.
    """
    if len(text or "") < MIN_LENGTH:
        return False, "", InvalidIBAN(f"IBAN: incorrect IBAN string passed <{text}>")

    canonical = normalize_iban(text)
    country_code, checksum, bban = _split(canonical)

    layout = lookup(country_code)
    if layout is None:
        return False, "", InvalidIBAN(f"IBAN: country <{country_code}> is not in the list")

    if len(canonical) != layout.length:
        return False, "", InvalidIBAN(
            f"IBAN: length ({len(canonical)}) does not match configuration length ({layout.length})"
        )

    digits = _to_digits(country_code, checksum, bban)
    if digits is None or mod97(digits) != 1:
        logger.debug("IBAN checksum mismatch: %s", canonical)
        return False, "", None

    return True, format_iban(canonical), None


def parse_iban(text: str) -> IBAN:
    """Validate an IBAN and split it into its parts. Raises InvalidIBAN."""
    valid, formatted, error = is_valid_iban(text)
    if error is not None:
        logger.debug("IBAN rejected: %s", str(error))
        raise error
    if not valid:
        raise InvalidIBAN()

    canonical = formatted.replace(" ", "")
    country_code, checksum, bban = _split(canonical)
    layout = lookup(country_code)

    return IBAN(
        raw=text,
        canonical=canonical,
        formatted=formatted,
        country_code=country_code,
        checksum=checksum,
        bban=bban,
        bank_code=_slice(canonical, layout.bank_span),
        branch_code=_slice(canonical, layout.branch_span),
        account_number=_slice(canonical, layout.account_span),
    )


def compute_checksum(text: str) -> int:
    """
    Return the check digits an IBAN should carry in positions 3-4.

    The given check digits are ignored (treated as "00"); the country is not
    looked up. Raises InvalidIBAN for input of 15 characters or less.
    """
    if len(text or "") <= MIN_LENGTH:
        raise InvalidIBAN(f"IBAN: incorrect IBAN string passed <{text}>")

    canonical = normalize_iban(text)
    # country code, check digits and at least one BBAN character
    if len(canonical) < 5:
        raise InvalidIBAN(f"IBAN: incorrect IBAN string passed <{text}>")

    country_code, _, bban = _split(canonical)
    digits = _to_digits(country_code, "00", bban)
    if digits is None:
        raise InvalidIBAN(f"IBAN: unexpected characters in <{text}>")
    return 98 - mod97(digits)
