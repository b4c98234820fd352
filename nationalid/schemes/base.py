"""
schemes/base.py
---------------
Scheme plugin system for the nationalid SDK.

Every identifier family is exposed twice: as plain module-level functions
(``generate_nric``, ``validate_nric`` …) and as a registered
:class:`IdentifierScheme` subclass that bundles them with a configuration
and a random source.  The CLI and the bulk validator only talk to schemes.

Usage
-----
Built-in schemes register themselves when :mod:`nationalid.schemes` is
imported.  Additional schemes can call :func:`register_scheme`::

    from nationalid.schemes.base import IdentifierScheme, register_scheme

    @register_scheme
    class MyScheme(IdentifierScheme):
        id = "myid"
        region = "XX"
        description = "Example identifier"
        pattern = r"X\\d{6}"

        def generate(self, **options):
            ...

        def validate(self, value):
            ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

from nationalid.core.config import DEFAULT_CONFIG, IdentifierConfig
from nationalid.core.random_source import (
    PythonRandomSource,
    RandomSource,
    default_random_source,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Scheme registry
# ---------------------------------------------------------------------------

_SCHEME_REGISTRY: Dict[str, Type["IdentifierScheme"]] = {}


def register_scheme(scheme_class: Type["IdentifierScheme"]) -> Type["IdentifierScheme"]:
    """
    Register a concrete :class:`IdentifierScheme` subclass.

    Can be used as a class decorator or called directly.

    Raises:
        TypeError:  If ``scheme_class`` is not an :class:`IdentifierScheme`
                    subclass.
        ValueError: If the id is empty or already registered.
    """
    if not isinstance(scheme_class, type) or not issubclass(scheme_class, IdentifierScheme):
        raise TypeError(f"{scheme_class!r} is not an identifier scheme class")

    scheme_id = scheme_class.id
    if not scheme_id:
        raise ValueError(f"{scheme_class.__name__} has no scheme id")
    existing = _SCHEME_REGISTRY.get(scheme_id)
    if existing is not None:
        raise ValueError(
            f"Scheme id {scheme_id!r} is taken by {existing.__name__}"
        )

    _SCHEME_REGISTRY[scheme_id] = scheme_class
    logger.debug("Registered scheme %s (%s)", scheme_id, scheme_class.region)
    return scheme_class


def deregister_scheme(scheme_id: str) -> None:
    """
    Remove a scheme from the registry by its id.

    Raises:
        KeyError: If no scheme with ``scheme_id`` is registered.
    """
    if scheme_id not in _SCHEME_REGISTRY:
        raise KeyError(f"Scheme {scheme_id!r} is not registered")
    del _SCHEME_REGISTRY[scheme_id]


def get_registered_schemes() -> Dict[str, Type["IdentifierScheme"]]:
    """Return a shallow copy of the registry mapping scheme id → class."""
    return dict(_SCHEME_REGISTRY)


def available_schemes() -> List[str]:
    """Return the sorted ids of all registered schemes."""
    return sorted(_SCHEME_REGISTRY)


def get_scheme(
    name: str,
    config: Optional[IdentifierConfig] = None,
    rng: Optional[RandomSource] = None,
) -> "IdentifierScheme":
    """
    Instantiate a registered scheme by id or region code.

    Lookup is case-insensitive, so ``"nric"``, ``"NRIC"`` and ``"sg"`` all
    resolve to the Singapore scheme.

    Args:
        name:   Scheme id (``"hkid"``) or region code (``"HK"``).
        config: Optional configuration; defaults to ``DEFAULT_CONFIG``.
        rng:    Optional random source; when omitted a seeded
                :class:`PythonRandomSource` is used if ``config.seed`` is set,
                otherwise the process-wide source.

    Raises:
        KeyError: If no registered scheme matches ``name``.
    """
    key = name.strip().lower()
    for scheme_class in _SCHEME_REGISTRY.values():
        if key in (scheme_class.id.lower(), scheme_class.region.lower()):
            return scheme_class(config=config, rng=rng)
    raise KeyError(
        f"Unknown scheme {name!r}. Available: {', '.join(available_schemes())}"
    )


# ---------------------------------------------------------------------------
# Abstract base class
# ---------------------------------------------------------------------------

class IdentifierScheme(ABC):
    """
    Abstract base class for all identifier families.

    Subclasses **must** define the class-level attributes ``id``, ``region``,
    ``description`` and ``pattern`` (a loose regex used for display only;
    validation is always done by :meth:`validate`), and implement
    :meth:`generate` and :meth:`validate`.
    """

    id: str = ""
    region: str = ""
    description: str = ""
    pattern: str = ""

    def __init__(
        self,
        config: Optional[IdentifierConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        if rng is not None:
            self.rng = rng
        elif self.config.seed is not None:
            self.rng = PythonRandomSource(self.config.seed)
        else:
            self.rng = default_random_source()

    @abstractmethod
    def generate(self, **options: Any) -> str:
        """Return one random identifier that passes :meth:`validate`."""

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Return ``True`` if ``value`` is a valid identifier; never raises."""

    def generate_many(self, count: int, **options: Any) -> List[str]:
        """
        Return exactly ``count`` independently generated identifiers.

        A non-positive ``count`` yields an empty list.  Values are not
        guaranteed to be distinct.
        """
        logger.debug("Generating %s %s value(s)", count, self.id)
        return [self.generate(**options) for _ in range(max(int(count), 0))]

    def normalize(self, value: str) -> str:
        """Return ``value`` in the form :meth:`validate` compares against."""
        return value

    def describe(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "region": self.region,
            "description": self.description,
            "pattern": self.pattern,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rng={self.rng!r})"
