"""
connectors/base.py
------------------
Abstract base class for sources of identifier columns.
"""

from abc import ABC, abstractmethod

import pandas as pd


class BaseConnector(ABC):
    """
    Abstract interface for all nationalid data source connectors.

    Usage::

        connector = SomeConnector(...)
        connector.connect()
        df = connector.fetch()
    """

    @abstractmethod
    def connect(self) -> None:
        """Check that the source is reachable; raise if it is not."""

    @abstractmethod
    def fetch(self) -> pd.DataFrame:
        """
        Return the source rows as a DataFrame.

        Raises:
            RuntimeError: If :meth:`connect` has not been called first.
        """

    def connect_and_fetch(self) -> pd.DataFrame:
        self.connect()
        return self.fetch()
