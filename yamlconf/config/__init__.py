"""
config - YAML configuration access.

This module provides:
- Config: Load a YAML file (optionally named per environment) and look up values by path.
- ConfigError: Raised when a config file can not be read or parsed.
"""

from .loader import ConfigError  # noqa: F401
from .yaml_config import Config  # noqa: F401
