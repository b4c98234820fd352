"""
nationalid — generators and validators for national identifier numbers.
"""

__version__ = "0.1.0"
__author__ = "nationalid"

from nationalid.core.config import IdentifierConfig, DEFAULT_CONFIG, load_config
from nationalid.core.exceptions import GenerationError, InvalidSelectorError
from nationalid.core.random_source import PythonRandomSource, RandomSource, ScriptedRandomSource
from nationalid.schemes import (
    available_schemes,
    calculate_checksum,
    checksum_table,
    format_nric,
    generate_hkid,
    generate_many_nrics,
    generate_multiple_ninos,
    generate_nino,
    generate_nric,
    get_nric_info,
    get_scheme,
    is_correct_nric_format,
    validate_hkid,
    validate_nino,
    validate_nric,
)

__all__ = [
    "IdentifierConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "GenerationError",
    "InvalidSelectorError",
    "PythonRandomSource",
    "RandomSource",
    "ScriptedRandomSource",
    "available_schemes",
    "calculate_checksum",
    "checksum_table",
    "format_nric",
    "generate_hkid",
    "generate_many_nrics",
    "generate_multiple_ninos",
    "generate_nino",
    "generate_nric",
    "get_nric_info",
    "get_scheme",
    "is_correct_nric_format",
    "validate_hkid",
    "validate_nino",
    "validate_nric",
    "__version__",
]
