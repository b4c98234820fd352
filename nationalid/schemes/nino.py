"""
schemes/nino.py
---------------
UK National Insurance numbers.

Layout: two prefix letters, six digits and an optional suffix letter from
``A B C D``, e.g. ``AB123456C``.  There is no checksum; validity is the
grammar below plus a denylist of prefixes that are never issued.
"""

from __future__ import annotations

import logging
import re
from typing import Any, FrozenSet, List, Optional, Tuple

from nationalid.core.config import DEFAULT_CONFIG, IdentifierConfig
from nationalid.core.exceptions import GenerationError
from nationalid.core.random_source import RandomSource, default_random_source
from nationalid.schemes.base import IdentifierScheme, register_scheme

logger = logging.getLogger(__name__)

PROHIBITED_PREFIXES: FrozenSet[str] = frozenset({"GB", "BG", "NK", "KN", "TN", "NT", "ZZ"})

FIRST_LETTERS: Tuple[str, ...] = (
    "A", "B", "C", "E", "G", "H", "J", "K", "L", "M",
    "N", "O", "P", "R", "S", "T", "W", "X", "Y", "Z",
)
SECOND_LETTERS: Tuple[str, ...] = (
    "A", "B", "C", "E", "G", "H", "J", "K", "L", "M",
    "N", "P", "R", "S", "T", "W", "X", "Y", "Z",
)
SUFFIX_LETTERS: Tuple[str, ...] = ("A", "B", "C", "D")

_NINO_RE = re.compile(
    "[{first}][{second}][0-9]{{6}}[{suffix}]?".format(
        first="".join(FIRST_LETTERS),
        second="".join(SECOND_LETTERS),
        suffix="".join(SUFFIX_LETTERS),
    )
)
_WHITESPACE_RE = re.compile(r"\s+")


def _normalize(value: str) -> str:
    return _WHITESPACE_RE.sub("", value).upper()


def _random_prefix(rng: RandomSource, max_attempts: int) -> str:
    for attempt in range(1, max_attempts + 1):
        prefix = rng.choice(FIRST_LETTERS) + rng.choice(SECOND_LETTERS)
        if prefix not in PROHIBITED_PREFIXES:
            if attempt > 1:
                logger.debug("NINO prefix accepted after %d attempts", attempt)
            return prefix
    raise GenerationError(
        f"No permitted NINO prefix drawn in {max_attempts} attempts"
    )


def generate_nino(
    rng: Optional[RandomSource] = None,
    config: Optional[IdentifierConfig] = None,
) -> str:
    """
    Generate a random NINO with a permitted prefix and a suffix letter.

    Raises:
        GenerationError: If ``config.max_prefix_attempts`` draws all hit the
                         denylist.
    """
    rng = rng or default_random_source()
    config = config or DEFAULT_CONFIG
    prefix = _random_prefix(rng, config.max_prefix_attempts)
    digits = "".join(str(rng.randint(0, 9)) for _ in range(6))
    return prefix + digits + rng.choice(SUFFIX_LETTERS)


def validate_nino(value: Any) -> bool:
    """
    Return ``True`` if ``value`` is a well-formed NINO.

    All whitespace is removed and letters are upper-cased first, so
    ``"ab 12 34 56 c"`` is accepted.  Non-string input returns ``False``.
    """
    if not isinstance(value, str) or not value:
        return False

    cleaned = _normalize(value)
    if not _NINO_RE.fullmatch(cleaned):
        return False
    return cleaned[:2] not in PROHIBITED_PREFIXES


def generate_multiple_ninos(
    count: int,
    rng: Optional[RandomSource] = None,
    config: Optional[IdentifierConfig] = None,
) -> List[str]:
    """Generate exactly ``count`` NINOs; a non-positive count returns ``[]``."""
    return [generate_nino(rng=rng, config=config) for _ in range(max(int(count), 0))]


@register_scheme
class NINOScheme(IdentifierScheme):
    id = "nino"
    region = "UK"
    description = "UK National Insurance number"
    pattern = r"[A-Z]{2}[0-9]{6}[A-D]?"

    def generate(self, **options: Any) -> str:
        return generate_nino(rng=self.rng, config=self.config)

    def validate(self, value: Any) -> bool:
        return validate_nino(value)

    def normalize(self, value: str) -> str:
        return _normalize(value)
