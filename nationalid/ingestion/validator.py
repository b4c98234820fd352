"""
ingestion/validator.py
----------------------
Bulk validation of identifier columns held in pandas objects.

:class:`IdentifierValidator` runs one scheme over every value of a Series or
DataFrame column and returns a per-row frame or a column summary.
:func:`detect_schemes` reports which registered schemes accept a single
value.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

import pandas as pd

from nationalid.core.result_schema import ColumnValidationResult
from nationalid.schemes import get_registered_schemes, get_scheme
from nationalid.schemes.base import IdentifierScheme

logger = logging.getLogger(__name__)


class IdentifierValidator:
    """
    Validates pandas data against a single identifier scheme.

    Args:
        scheme: An :class:`IdentifierScheme` instance, or a scheme id /
                region code resolved through :func:`get_scheme`.
    """

    def __init__(self, scheme: Union[str, IdentifierScheme]) -> None:
        self.scheme = get_scheme(scheme) if isinstance(scheme, str) else scheme

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate_series(self, series: pd.Series) -> pd.DataFrame:
        """
        Validate every value in ``series``.

        Returns:
            A DataFrame indexed like ``series`` with columns ``value``,
            ``normalized`` (``None`` for missing values) and ``is_valid``.
        """
        missing = series.isna()
        normalized = [
            None if is_missing else self._normalize(value)
            for value, is_missing in zip(series, missing)
        ]
        is_valid = [
            False if is_missing else self.scheme.validate(value)
            for value, is_missing in zip(series, missing)
        ]
        return pd.DataFrame(
            {
                "value": series,
                "normalized": pd.Series(normalized, index=series.index, dtype=object),
                "is_valid": pd.Series(is_valid, index=series.index, dtype=bool),
            },
            index=series.index,
        )

    def validate_column(self, df: pd.DataFrame, column: str) -> ColumnValidationResult:
        """
        Validate one column of ``df`` and summarise the outcome.

        Raises:
            KeyError: If ``column`` is not present in ``df``.
        """
        if column not in df.columns:
            logger.warning("Column %r not found; available: %s", column, list(df.columns))
            raise KeyError(f"Column {column!r} not found in data.")

        series = df[column]
        rows = self.validate_series(series)
        missing = series.isna()
        invalid_mask = ~rows["is_valid"] & ~missing

        result = ColumnValidationResult(
            column=column,
            scheme=self.scheme.id,
            total=len(series),
            valid=int(rows["is_valid"].sum()),
            invalid=int(invalid_mask.sum()),
            missing=int(missing.sum()),
            invalid_rows=[_plain(label) for label in rows.index[invalid_mask.to_numpy()]],
        )
        logger.debug(
            "Validated column %r with %s: %d valid, %d invalid, %d missing",
            column, self.scheme.id, result.valid, result.invalid, result.missing,
        )
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _normalize(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return str(value)
        return self.scheme.normalize(value)


def _plain(label: Any) -> Any:
    """Convert numpy scalar labels to built-in Python values for JSON output."""
    return label.item() if hasattr(label, "item") else label


def detect_schemes(value: Any) -> List[str]:
    """Return the ids of every registered scheme that accepts ``value``."""
    return sorted(
        scheme_id
        for scheme_id, scheme_class in get_registered_schemes().items()
        if scheme_class().validate(value)
    )
