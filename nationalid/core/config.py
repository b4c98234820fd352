"""
core/config.py
--------------
Centralized configuration management for the nationalid SDK.

Configuration can be built in code or loaded from a YAML file::

    version: 1
    generator:
      max_prefix_attempts: 500
      default_count: 10
      seed: 42
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class IdentifierConfig:
    """
    Configuration object for identifier generation.

    Attributes:
        max_prefix_attempts: Upper bound on rejection-sampling rounds when a
                             generator has to redraw a denylisted prefix.
        default_count:       Batch size used by the CLI when ``--count`` is
                             omitted.
        seed:                Optional seed for the default random source.
                             ``None`` means non-deterministic output.
    """

    max_prefix_attempts: int = 1000
    default_count: int = 1
    seed: Optional[int] = None

    def validate(self) -> None:
        """Validate configuration values are within acceptable ranges."""
        if not isinstance(self.max_prefix_attempts, int) or self.max_prefix_attempts < 1:
            raise ValueError("max_prefix_attempts must be a positive integer.")
        if not isinstance(self.default_count, int) or self.default_count < 1:
            raise ValueError("default_count must be a positive integer.")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError("seed must be an integer or null.")

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(config_path: Union[str, Path]) -> IdentifierConfig:
    """
    Load an :class:`IdentifierConfig` from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        A validated :class:`IdentifierConfig`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError:        If the YAML is malformed or holds unknown keys.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse config YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must be a YAML dictionary.")

    if "version" not in data:
        raise ValueError("Config file missing top-level 'version' key.")

    section = data.get("generator") or {}
    if not isinstance(section, dict):
        raise ValueError("Config 'generator' section must be a dictionary.")

    known = {f.name for f in fields(IdentifierConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown generator settings: {', '.join(unknown)}")

    config = IdentifierConfig(**section)
    config.validate()
    return config


# Singleton default config; callers may override by passing their own instance.
DEFAULT_CONFIG = IdentifierConfig()
