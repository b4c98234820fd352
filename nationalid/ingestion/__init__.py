"""ingestion sub-package — bulk validation of identifier columns."""

from nationalid.ingestion.validator import IdentifierValidator, detect_schemes

__all__ = ["IdentifierValidator", "detect_schemes"]
