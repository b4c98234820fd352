"""
core/result_schema.py
---------------------
Structured, typed result objects returned by the SDK.

Classes
-------
* :class:`NRICInfo`               — decomposition of a single NRIC/FIN string.
* :class:`ColumnValidationResult` — outcome of validating a whole column of
                                    identifiers against one scheme.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# NRICInfo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NRICInfo:
    """
    Field breakdown of an NRIC/FIN.

    Attributes:
        value:             The normalised (stripped, upper-cased) input.
        first_char:        Prefix letter, or ``None`` when malformed.
        identifier:        Last four characters, or ``None`` when malformed.
        checksum:          Trailing check letter, or ``None`` when malformed.
        is_correct_format: ``True`` if the value matches the NRIC grammar.
        is_valid:          ``True`` if the format is correct *and* the
                           checksum letter matches.
    """

    value: str
    first_char: Optional[str]
    identifier: Optional[str]
    checksum: Optional[str]
    is_correct_format: bool
    is_valid: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "first_char": self.first_char,
            "identifier": self.identifier,
            "checksum": self.checksum,
            "is_correct_format": self.is_correct_format,
            "is_valid": self.is_valid,
        }


# ---------------------------------------------------------------------------
# ColumnValidationResult
# ---------------------------------------------------------------------------

@dataclass
class ColumnValidationResult:
    """
    Summary of validating every row of a column against one scheme.

    Attributes:
        column:       Column name.
        scheme:       Scheme id (e.g. ``"nric"``).
        total:        Number of rows inspected, missing values included.
        valid:        Rows whose value passed validation.
        invalid:      Non-missing rows that failed validation.
        missing:      Null/NaN rows.
        invalid_rows: Row labels of the failing rows, in input order.
    """

    column: str
    scheme: str
    total: int
    valid: int
    invalid: int
    missing: int
    invalid_rows: List[Any] = field(default_factory=list)

    @property
    def valid_ratio(self) -> float:
        """Share of non-missing rows that are valid (``1.0`` for no rows)."""
        checked = self.valid + self.invalid
        if checked == 0:
            return 1.0
        return self.valid / checked

    @property
    def passed(self) -> bool:
        return self.invalid == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column": self.column,
            "scheme": self.scheme,
            "total": self.total,
            "valid": self.valid,
            "invalid": self.invalid,
            "missing": self.missing,
            "valid_ratio": round(self.valid_ratio, 4),
            "passed": self.passed,
            "invalid_rows": self.invalid_rows,
        }

    def to_json(self, indent: int = 2) -> str:
        """
        Serialise the result to a JSON string.

        Args:
            indent: JSON indentation level (default: 2).
        """
        return json.dumps(self.to_dict(), indent=indent, default=str)
