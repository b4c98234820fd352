"""
schemes package — identifier families and the scheme registry.

Importing this package registers the built-in HKID, NRIC and NINO schemes.
"""

from nationalid.schemes.base import (
    IdentifierScheme,
    available_schemes,
    deregister_scheme,
    get_registered_schemes,
    get_scheme,
    register_scheme,
)
from nationalid.schemes.hkid import HKIDScheme, generate_hkid, validate_hkid
from nationalid.schemes.nric import (
    NRICScheme,
    calculate_checksum,
    checksum_table,
    format_nric,
    generate_many_nrics,
    generate_nric,
    get_nric_info,
    is_correct_nric_format,
    validate_nric,
)
from nationalid.schemes.nino import (
    NINOScheme,
    generate_multiple_ninos,
    generate_nino,
    validate_nino,
)

__all__ = [
    "IdentifierScheme",
    "available_schemes",
    "deregister_scheme",
    "get_registered_schemes",
    "get_scheme",
    "register_scheme",
    "HKIDScheme",
    "generate_hkid",
    "validate_hkid",
    "NRICScheme",
    "calculate_checksum",
    "checksum_table",
    "format_nric",
    "generate_many_nrics",
    "generate_nric",
    "get_nric_info",
    "is_correct_nric_format",
    "validate_nric",
    "NINOScheme",
    "generate_multiple_ninos",
    "generate_nino",
    "validate_nino",
]
