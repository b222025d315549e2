import math
import re

import yaml

from ..common import compat_typing as t
from ..logger import get_logger

logger = get_logger('loader')


class ConfigError(Exception):
    """Raised when a config document can not be read or parsed."""

    def __init__(self, message: str, filename: str = '') -> None:
        super().__init__(message)
        self.filename = filename

    def __str__(self) -> str:
        msg = super().__str__()
        if self.filename:
            return f'{self.filename}: {msg}'
        return msg


class CoreSchemaLoader(yaml.SafeLoader):
    """Safe loader resolving plain scalars with the YAML 1.2 core schema

    Plain scalars that YAML 1.1 turns into other types stay strings here:
    ``yes``/``no``/``on``/``off``, sexagesimal numbers (``12:30``), numbers with
    a leading zero (``0755``), timestamps and ``=``.
    """


_REPLACED_TAGS = (
    'tag:yaml.org,2002:bool',
    'tag:yaml.org,2002:int',
    'tag:yaml.org,2002:float',
    'tag:yaml.org,2002:timestamp',
    'tag:yaml.org,2002:value',
)

CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _REPLACED_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreSchemaLoader.add_implicit_resolver(
    'tag:yaml.org,2002:bool',
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list('tTfF'),
)
CoreSchemaLoader.add_implicit_resolver(
    'tag:yaml.org,2002:int',
    re.compile(r'^(?:[-+]?(?:0|[1-9][0-9]*)|0o[0-7]+|0x[0-9a-fA-F]+)$'),
    list('-+0123456789'),
)
CoreSchemaLoader.add_implicit_resolver(
    'tag:yaml.org,2002:float',
    re.compile(
        r'^(?:[-+]?(?:\.[0-9]+|[0-9]+\.[0-9]*)(?:[eE][-+]?[0-9]+)?'
        r'|[-+]?[0-9]+[eE][-+]?[0-9]+'
        r'|[-+]?\.(?:inf|Inf|INF)'
        r'|\.(?:nan|NaN|NAN))$'
    ),
    list('-+.0123456789'),
)


def parse_yaml(text: str, filename: str = '') -> t.Any:
    """Parse a single YAML document

    Args:
        text (str): YAML text
        filename (str, optional): file the text came from, only used in error messages.

    Raises:
        ConfigError: the text is not valid YAML

    Returns:
        Any: parsed tree, None for an empty document
    """
    try:
        return yaml.load(text, Loader=CoreSchemaLoader)  # noqa: S506
    except yaml.YAMLError as e:
        raise ConfigError(f'Invalid YAML: {e}', filename) from e


def read_yaml_file(filename: str) -> t.Any:
    """Read a UTF-8 encoded YAML file and parse it

    Args:
        filename (str): path of the file

    Raises:
        ConfigError: the file could not be opened, decoded or parsed

    Returns:
        Any: parsed tree
    """
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ConfigError('Config file not found', filename) from e
    except OSError as e:
        raise ConfigError(f'Could not read config file: {e}', filename) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f'Config file is not UTF-8 encoded: {e}', filename) from e
    logger.debug(f'Read {len(text)} chars from {filename}')
    return parse_yaml(text, filename)


def _float_to_str(value: float) -> str:
    if math.isnan(value):
        return '.nan'
    if math.isinf(value):
        return '.inf' if value > 0 else '-.inf'
    return str(value)


def scalar_to_str(value: t.Any) -> str:
    """Render a scalar node as text, returns empty string for null, sequences and mappings

    Booleans are rendered the way YAML writes them ("true" / "false").
    """
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_to_str(value)
    return ''


def sequence_to_list(value: t.Any) -> t.List[str]:
    """Render every item of a sequence node with scalar_to_str, returns [] for any other node"""
    if not isinstance(value, list):
        return []
    return [scalar_to_str(item) for item in value]
