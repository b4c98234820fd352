"""
connectors/csv.py
-----------------
CSV file connector — reads identifier lists into pandas DataFrames.

Every column is read as text so identifiers keep their leading zeros and
letter case; empty cells come back as missing values.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import pandas as pd

from nationalid.connectors.base import BaseConnector

logger = logging.getLogger(__name__)


class CSVConnector(BaseConnector):
    """
    Loads a CSV file from the local filesystem into a pandas DataFrame.

    Args:
        filepath:    Absolute or relative path to the CSV file.
        encoding:    File encoding (default: ``'utf-8-sig'`` handles BOM).
        delimiter:   Column delimiter (default: ``','``).
        sample_size: Optional maximum number of rows to read.
        kwargs:      Additional keyword arguments forwarded to
                     :func:`pandas.read_csv`.

    Example::

        connector = CSVConnector("/data/customers.csv", sample_size=50_000)
        connector.connect()
        df = connector.fetch()
    """

    def __init__(
        self,
        filepath: str,
        encoding: str = "utf-8-sig",
        delimiter: str = ",",
        sample_size: Optional[int] = None,
        **kwargs,
    ) -> None:
        self.filepath = filepath
        self.encoding = encoding
        self.delimiter = delimiter
        self.sample_size = sample_size
        self._kwargs = kwargs
        self._connected: bool = False

    def connect(self) -> None:
        """
        Validate that the CSV file exists and is readable.

        Raises:
            FileNotFoundError: If the file does not exist at the given path.
            PermissionError:   If the process lacks read permission.
            ValueError:        If the path points to a directory.
        """
        if not os.path.exists(self.filepath):
            raise FileNotFoundError(f"CSV file not found: {self.filepath!r}")
        if os.path.isdir(self.filepath):
            raise ValueError(
                f"Expected a file path, got a directory: {self.filepath!r}"
            )
        if not os.access(self.filepath, os.R_OK):
            raise PermissionError(f"No read permission for file: {self.filepath!r}")
        self._connected = True

    def fetch(self) -> pd.DataFrame:
        """
        Read the CSV file and return a DataFrame of strings.

        Falls back to latin-1 (with a ``WARNING`` log) when the configured
        encoding cannot decode the file.

        Raises:
            RuntimeError: If :meth:`connect` was not called first.
            pandas.errors.ParserError: If the file cannot be parsed as CSV.
        """
        if not self._connected:
            raise RuntimeError("Call connect() before fetch().")

        try:
            df = self._read(self.encoding)
        except UnicodeDecodeError:
            logger.warning(
                "%s decode failed for %r, retrying with latin-1.",
                self.encoding,
                self.filepath,
            )
            df = self._read("latin-1")

        logger.debug("Read %d row(s) from %r", len(df), self.filepath)
        return df

    def _read(self, encoding: str) -> pd.DataFrame:
        return pd.read_csv(
            self.filepath,
            encoding=encoding,
            sep=self.delimiter,
            dtype=str,
            nrows=self.sample_size,
            **self._kwargs,
        )

    def __repr__(self) -> str:
        return f"CSVConnector(filepath={self.filepath!r}, connected={self._connected})"
