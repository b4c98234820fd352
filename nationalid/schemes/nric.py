"""
schemes/nric.py
---------------
Singapore NRIC / FIN numbers.

Layout: a prefix letter from ``S T F G M``, seven digits and a check letter,
e.g. ``S1234567D``.  The check letter comes from one of three lookup tables
selected by the prefix, indexed by a weighted digit sum modulo 11.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Optional, Tuple

from nationalid.core.exceptions import InvalidSelectorError
from nationalid.core.random_source import RandomSource, default_random_source
from nationalid.core.result_schema import NRICInfo
from nationalid.schemes.base import IdentifierScheme, register_scheme

FIRST_CHARS: Tuple[str, ...] = ("S", "T", "F", "G", "M")

CHECKSUM_TABLES: Dict[str, Tuple[str, ...]] = {
    "ST": ("J", "Z", "I", "H", "G", "F", "E", "D", "C", "B", "A"),
    "FG": ("X", "W", "U", "T", "R", "Q", "P", "N", "M", "L", "K"),
    "M": ("K", "L", "J", "N", "P", "Q", "R", "T", "U", "W", "X"),
}

DIGIT_WEIGHTS: Tuple[int, ...] = (2, 7, 6, 5, 4, 3, 2)

OFFSETS: Dict[str, int] = {"S": 0, "F": 0, "T": 4, "G": 4, "M": 3}

_NRIC_RE = re.compile(r"[STFGM][0-9]{7}[A-Z]")
_FIRST_CHAR_RE = re.compile(r"[STFGM]", re.IGNORECASE)
_SEVEN_DIGITS_RE = re.compile(r"[0-9]{7}")


def _normalize(value: str) -> str:
    return value.strip().upper()


def is_correct_nric_format(value: Any) -> bool:
    """Return ``True`` if ``value`` matches ``[STFGM]`` + 7 digits + a letter."""
    if not isinstance(value, str):
        return False
    return _NRIC_RE.fullmatch(_normalize(value)) is not None


def checksum_table(first_char: str) -> Tuple[str, ...]:
    """
    Return the 11-letter check table for a prefix letter.

    Raises:
        InvalidSelectorError: If ``first_char`` is not one of ``S T F G M``.
    """
    if isinstance(first_char, str) and len(first_char) == 1:
        for group, table in CHECKSUM_TABLES.items():
            if first_char in group:
                return table
    raise InvalidSelectorError(f'Unable to find checksum table for "{first_char}"')


def calculate_checksum(first_char: str, digits: str) -> str:
    """
    Compute the check letter for a prefix letter and seven-digit body.

    Raises:
        InvalidSelectorError: For an unknown prefix letter.
        ValueError:           If ``digits`` is not exactly seven ASCII digits.
    """
    table = checksum_table(first_char)
    if not isinstance(digits, str) or not _SEVEN_DIGITS_RE.fullmatch(digits):
        raise ValueError(f"Expected seven digits, got {digits!r}")

    weight = sum(int(d) * w for d, w in zip(digits, DIGIT_WEIGHTS))
    index = (OFFSETS[first_char] + weight) % 11
    if first_char == "M":
        index = 10 - index
    return table[index]


def _validate_single(value: Any) -> bool:
    if not is_correct_nric_format(value):
        return False
    normalized = _normalize(value)
    return normalized[-1] == calculate_checksum(normalized[0], normalized[1:-1])


def validate_nric(value: Any) -> bool:
    """
    Return ``True`` if ``value`` is a valid NRIC/FIN.

    ``value`` may also be a list or tuple of strings, in which case every
    item must be valid.
    """
    if isinstance(value, (list, tuple)):
        return all(_validate_single(item) for item in value)
    return _validate_single(value)


def generate_nric(
    first_char: Optional[str] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Generate a random NRIC/FIN with a valid check letter.

    Args:
        first_char: Prefix letter (case-insensitive).  Anything that is not
                    one of ``S T F G M`` is ignored and a random prefix used.
        rng:        Random source; defaults to the process-wide one.
    """
    rng = rng or default_random_source()
    if isinstance(first_char, str) and _FIRST_CHAR_RE.fullmatch(first_char):
        prefix = first_char.upper()
    else:
        prefix = rng.choice(FIRST_CHARS)

    digits = "".join(str(rng.randint(0, 9)) for _ in range(7))
    return prefix + digits + calculate_checksum(prefix, digits)


def _clamp_count(count: Any) -> int:
    try:
        number = float(count)
    except (TypeError, ValueError):
        return 1
    if math.isnan(number) or number < 1:
        return 1
    if math.isinf(number):
        raise ValueError("count must be finite")
    return int(number)


def generate_many_nrics(
    count: Any = 1,
    first_char: Optional[str] = None,
    rng: Optional[RandomSource] = None,
) -> List[str]:
    """
    Generate ``count`` NRICs.

    ``count`` falls back to 1 when it is not a positive number; fractional
    values are truncated.
    """
    return [generate_nric(first_char, rng=rng) for _ in range(_clamp_count(count))]


def get_nric_info(value: str) -> NRICInfo:
    """Break an NRIC into its fields; derived fields are ``None`` if malformed."""
    normalized = _normalize(value)
    correct = is_correct_nric_format(normalized)
    return NRICInfo(
        value=normalized,
        first_char=normalized[0] if correct else None,
        identifier=normalized[-4:] if correct else None,
        checksum=normalized[-1] if correct else None,
        is_correct_format=correct,
        is_valid=_validate_single(normalized) if correct else False,
    )


def format_nric(value: str) -> str:
    """Render ``S1234567D`` as ``S 1234 567 D``; malformed input is returned normalised."""
    normalized = _normalize(value)
    if not is_correct_nric_format(normalized):
        return normalized
    digits = normalized[1:-1]
    return f"{normalized[0]} {digits[:4]} {digits[4:]} {normalized[-1]}"


@register_scheme
class NRICScheme(IdentifierScheme):
    id = "nric"
    region = "SG"
    description = "Singapore NRIC / FIN"
    pattern = r"[STFGM][0-9]{7}[A-Z]"

    def generate(self, first_char: Optional[str] = None, **options: Any) -> str:
        return generate_nric(first_char, rng=self.rng)

    def generate_many(self, count: Any = 1, first_char: Optional[str] = None, **options: Any) -> List[str]:
        return generate_many_nrics(count, first_char, rng=self.rng)

    def validate(self, value: Any) -> bool:
        return _validate_single(value)

    def normalize(self, value: str) -> str:
        return _normalize(value)

    def info(self, value: str) -> NRICInfo:
        return get_nric_info(value)

    def format(self, value: str) -> str:
        return format_nric(value)
