"""connectors sub-package — data source connectors for bulk validation."""

from nationalid.connectors.base import BaseConnector
from nationalid.connectors.csv import CSVConnector

__all__ = ["BaseConnector", "CSVConnector"]
