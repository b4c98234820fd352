"""
core/random_source.py
---------------------
Pluggable random sources used by every identifier generator.

Generators only ever ask for three things: an integer in a closed range, an
element of a sequence, and a fair coin flip.  Tests inject a
:class:`ScriptedRandomSource` to pin exact outputs; production code uses a
:class:`PythonRandomSource`, optionally seeded for reproducible batches.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """Interface for all random sources."""

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Return an integer ``n`` with ``low <= n <= high``."""

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence.")
        return seq[self.randint(0, len(seq) - 1)]

    def coin(self) -> bool:
        """Return ``True`` with probability one half."""
        return self.randint(0, 1) == 1


class PythonRandomSource(RandomSource):
    """
    Random source backed by :class:`random.Random`.

    Args:
        seed: Optional seed. Two sources built with the same seed produce the
              same identifiers in the same order.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def coin(self) -> bool:
        return self._rng.random() < 0.5

    def __repr__(self) -> str:
        return f"PythonRandomSource(seed={self.seed!r})"


class ScriptedRandomSource(RandomSource):
    """
    Replays a fixed sequence of integers.

    Every draw consumes one value: ``randint`` returns it as-is, ``choice``
    uses it as an index, and ``coin`` treats any non-zero value as heads.

    Raises:
        ValueError: If a scripted value lies outside the requested range.
        IndexError: If the script runs out of values.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def _next(self) -> int:
        if self._position >= len(self._values):
            raise IndexError(
                f"Scripted random source exhausted after {self._position} draws."
            )
        value = self._values[self._position]
        self._position += 1
        return value

    def randint(self, low: int, high: int) -> int:
        value = self._next()
        if not low <= value <= high:
            raise ValueError(
                f"Scripted value {value} outside requested range [{low}, {high}]"
            )
        return value

    def coin(self) -> bool:
        return self._next() != 0


_DEFAULT_SOURCE = PythonRandomSource()


def default_random_source() -> RandomSource:
    """Return the process-wide random source."""
    return _DEFAULT_SOURCE
