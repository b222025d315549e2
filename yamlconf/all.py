# pylint: disable=unused-import
# flake8: noqa: F401
# ruff: noqa: F401

from .config import Config, ConfigError
from .config.loader import scalar_to_str, sequence_to_list
from .logger import get_logger
