"""
yamlconf - path-addressed access to YAML configuration files.

Example usage:

    ```python
    from yamlconf import Config

    config = Config('config_{env}.yaml', environment='dev')
    config.get_str('db/sql/host')
    ```
"""

from .config import Config, ConfigError  # noqa: F401
from .logger import get_logger  # noqa: F401

__version__ = '0.1.0'
