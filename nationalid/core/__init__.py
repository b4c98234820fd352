"""core sub-package — configuration, random sources, exceptions and result records."""

from nationalid.core.config import IdentifierConfig, DEFAULT_CONFIG, load_config
from nationalid.core.exceptions import GenerationError, InvalidSelectorError
from nationalid.core.random_source import (
    PythonRandomSource,
    RandomSource,
    ScriptedRandomSource,
    default_random_source,
)
from nationalid.core.result_schema import ColumnValidationResult, NRICInfo

__all__ = [
    "IdentifierConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "GenerationError",
    "InvalidSelectorError",
    "PythonRandomSource",
    "RandomSource",
    "ScriptedRandomSource",
    "default_random_source",
    "ColumnValidationResult",
    "NRICInfo",
]
