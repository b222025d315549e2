import copy
import os

from ..common import compat_typing as t
from ..logger import get_logger
from .loader import ConfigError, parse_yaml, read_yaml_file, scalar_to_str, sequence_to_list
from .template import TemplateError, name_placeholders, substitute

logger = get_logger('config')

_MISSING = object()


class Config:
    """Read-only, path-addressed view of a YAML document.

    Nested mapping keys are addressed with a path joined by ``separator``
    ("/" by default). The file name may contain an ``{env}`` placeholder which
    is replaced by ``environment`` when one is given.

    Example usage:

        ```python
        config = Config('config_{env}.yaml', environment='dev')
        host = config.get_str('db/sql/host')
        dsn = config.format('{}:{}@{}', 'db/sql/username+password+host')
        ```

    Lookups never raise, a missing key or a value of the wrong kind gives
    ``default``, ``''`` or ``[]``. Only construction raises ``ConfigError``:
    when the file can not be read, the YAML is invalid, or ``separator`` is
    empty (paths are split with ``str.split``, which needs a non-empty
    separator).

    Plain scalars are read with the YAML 1.2 core schema, so ``yes``, ``off``,
    ``12:30`` or ``0755`` come back as the strings written in the file.
    """

    __slots__ = ('_content', '_filename', '_separator', '_environment')

    DEFAULT_FILENAME = 'config.yaml'
    DEFAULT_SEPARATOR = '/'
    ENV_PLACEHOLDER = '{env}'
    ATTRIBUTE_JOINER = '+'

    # Used by Config.from_env()
    CONFIG_FILE = os.getenv('YAMLCONF_FILE') or DEFAULT_FILENAME
    CONFIG_SEPARATOR = os.getenv('YAMLCONF_SEPARATOR') or DEFAULT_SEPARATOR
    CONFIG_ENV = os.getenv('YAMLCONF_ENV') or None

    def __init__(
        self,
        filename: str = DEFAULT_FILENAME,
        separator: str = DEFAULT_SEPARATOR,
        environment: t.Optional[str] = None,
    ) -> None:
        self._check_separator(separator)
        filename = self._resolve_filename(filename, environment)
        logger.debug(f'Loading config file {filename} (environment: {environment})')
        try:
            content = read_yaml_file(filename)
        except ConfigError as e:
            logger.warning(f'Failed to load config: {e}')
            raise
        self._content = content
        self._filename = filename
        self._separator = separator
        self._environment = environment

    @classmethod
    def from_string(cls, yaml_text: str, separator: str = DEFAULT_SEPARATOR) -> t.Self:
        """Create a config from YAML text, without any file access

        Args:
            yaml_text (str): YAML document
            separator (str, optional): path separator. Defaults to '/'.

        Raises:
            ConfigError: the text is not valid YAML

        Returns:
            Config: config with an empty filename and no environment
        """
        cls._check_separator(separator)
        content = parse_yaml(yaml_text)
        config = cls.__new__(cls)
        config._content = content
        config._filename = ''
        config._separator = separator
        config._environment = None
        return config

    @classmethod
    def from_env(cls) -> t.Self:
        """Create a config from the file named by shell environment variables

        - YAMLCONF_FILE: file name or template, defaults to "config.yaml"
        - YAMLCONF_SEPARATOR: path separator, defaults to "/"
        - YAMLCONF_ENV: environment tag, not set by default
        """
        return cls(cls.CONFIG_FILE, cls.CONFIG_SEPARATOR, cls.CONFIG_ENV)

    @classmethod
    def _reload(cls) -> None:
        """Reload to accept new environment variables. Mainly used in unit tests."""
        cls.CONFIG_FILE = os.getenv('YAMLCONF_FILE') or cls.DEFAULT_FILENAME
        cls.CONFIG_SEPARATOR = os.getenv('YAMLCONF_SEPARATOR') or cls.DEFAULT_SEPARATOR
        cls.CONFIG_ENV = os.getenv('YAMLCONF_ENV') or None

    @staticmethod
    def _check_separator(separator: str) -> None:
        if not separator:
            raise ConfigError('Path separator must not be empty')

    @classmethod
    def _resolve_filename(cls, filename: str, environment: t.Optional[str]) -> str:
        if environment is None:
            return filename
        return filename.replace(cls.ENV_PLACEHOLDER, environment)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def environment(self) -> t.Optional[str]:
        return self._environment

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(filename={self._filename!r}, '
            f'separator={self._separator!r}, environment={self._environment!r})'
        )

    def __contains__(self, path: str) -> bool:
        return self._walk(self._content, path.split(self._separator)) is not _MISSING

    @staticmethod
    def _walk(node: t.Any, keys: t.List[str]) -> t.Any:
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return _MISSING
            node = node[key]
        return node

    def get(self, path: str, default: t.Any = None) -> t.Any:
        """Get the node at path

        Args:
            path (str): keys joined by the separator, e.g. "db/sql/host"
            default (Any, optional): returned if the path does not exist. Defaults to None.

        Returns:
            Any: a copy of the node, or default
        """
        node = self._walk(self._content, path.split(self._separator))
        if node is _MISSING:
            return default
        return copy.deepcopy(node)

    def get_str(self, path: str) -> str:
        """Get a scalar as text, empty string if missing or not a scalar"""
        node = self._walk(self._content, path.split(self._separator))
        if node is _MISSING:
            return ''
        return scalar_to_str(node)

    def get_list(self, path: str) -> t.List[str]:
        """Get a sequence as a list of texts, empty list if missing or not a sequence"""
        node = self._walk(self._content, path.split(self._separator))
        if node is _MISSING:
            return []
        return sequence_to_list(node)

    def format(self, template: str, path: str) -> str:
        """Fill the "{}" placeholders of template with sibling values

        The last segment of path lists the keys to use, joined by "+", in
        placeholder order:

            ```python
            config.format('{}:{}', 'db/sql/database+username')  # 'my_db:user'
            ```

        Returns an empty string if any key is missing, or if the number of
        placeholders does not match the number of keys.
        """
        keys = path.split(self._separator)
        names = keys.pop().split(self.ATTRIBUTE_JOINER)
        parent = self._walk(self._content, keys)
        if parent is _MISSING:
            logger.debug(f'format {path!r}: parent path not found')
            return ''
        values = {}
        for name in names:
            node = self._walk(parent, [name])
            if node is _MISSING:
                logger.debug(f'format {path!r}: attribute {name!r} not found')
                return ''
            values[name] = scalar_to_str(node)
        try:
            return substitute(name_placeholders(template, names), values)
        except TemplateError as e:
            logger.debug(f'format {path!r}: {e}')
            return ''
