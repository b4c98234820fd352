"""
schemes/hkid.py
---------------
Hong Kong Identity Card numbers.

Layout: one or two uppercase letters, six digits and a check character,
e.g. ``AB1234569`` or ``C6686689``.

Checksum
--------
The eight body positions are weighted 9 down to 2.  Letters count as
``ord(letter) - 55`` (A=10 … Z=35); a missing first letter counts as 36.
With ``r = sum % 11`` the check character is ``"0"`` for ``r == 0``,
``"A"`` for ``r == 1`` and ``str(11 - r)`` otherwise.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from nationalid.core.random_source import RandomSource, default_random_source
from nationalid.schemes.base import IdentifierScheme, register_scheme

BLANK_LETTER_VALUE = 36
BODY_LENGTH = 8

_LETTER_LOW, _LETTER_HIGH = 10, 35
_DIGITS = "0123456789"
_UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Prefix match only: characters after the check position are not rejected here.
_HKID_PREFIX_RE = re.compile(r"[A-Z]{1,2}[0-9]{6}[0-9A]")


def hkid_check_character(remainder: int) -> str:
    """Map ``sum % 11`` to the HKID check character."""
    if remainder == 0:
        return "0"
    if remainder == 1:
        return "A"
    return str(11 - remainder)


def generate_hkid(
    single_letter: Optional[bool] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Generate a random HKID with a valid check character.

    Args:
        single_letter: ``True`` forces a one-letter prefix, ``False`` a
                       two-letter prefix; ``None`` picks either with equal
                       probability.
        rng:           Random source; defaults to the process-wide one.
    """
    rng = rng or default_random_source()
    if single_letter is None:
        single_letter = rng.coin()

    total = 0
    parts = []
    for index in range(BODY_LENGTH):
        if index == 0 and single_letter:
            value = BLANK_LETTER_VALUE
        elif index <= 1:
            value = rng.randint(_LETTER_LOW, _LETTER_HIGH)
        else:
            value = rng.randint(0, 9)
        total += value * (9 - index)

        if value == BLANK_LETTER_VALUE:
            parts.append("")
        elif index <= 1:
            parts.append(chr(value + 55))
        else:
            parts.append(str(value))

    parts.append(hkid_check_character(total % 11))
    return "".join(parts)


def validate_hkid(value: Any) -> bool:
    """
    Return ``True`` if ``value`` is a valid HKID.

    The value is not normalised: letters must already be uppercase and no
    brackets or spaces are allowed around the check character.
    """
    if not isinstance(value, str) or not value:
        return False
    if not _HKID_PREFIX_RE.match(value):
        return False

    body, check = value[:-1], value[-1]
    length = len(body)
    total = BLANK_LETTER_VALUE * 9 if length % 2 else 0
    for index, char in enumerate(body):
        weight = length + 1 - index
        if char in _UPPERCASE:
            total += (ord(char) - 55) * weight
        elif char in _DIGITS:
            total += int(char) * weight
        else:
            return False

    return check == hkid_check_character(total % 11)


@register_scheme
class HKIDScheme(IdentifierScheme):
    id = "hkid"
    region = "HK"
    description = "Hong Kong Identity Card number"
    pattern = r"[A-Z]{1,2}[0-9]{6}[0-9A]"

    def generate(self, single_letter: Optional[bool] = None, **options: Any) -> str:
        return generate_hkid(single_letter, rng=self.rng)

    def validate(self, value: Any) -> bool:
        return validate_hkid(value)
