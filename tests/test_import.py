import inspect
import sys


def test_import_from_all() -> None:
    if 'yamlconf' in sys.modules:
        del sys.modules['yamlconf']

    # exported methods / classes
    from yamlconf.all import Config, ConfigError, get_logger, scalar_to_str, sequence_to_list

    # pass ruff format
    assert all(callable(fn) for fn in [get_logger, scalar_to_str, sequence_to_list])
    assert all(inspect.isclass(cls) for cls in [Config, ConfigError])
    assert issubclass(ConfigError, Exception)


def test_logger_names() -> None:
    from yamlconf import get_logger

    assert get_logger().name == 'yamlconf'
    assert get_logger('config').name == 'yamlconf.config'


def test_logger_has_no_handlers() -> None:
    from yamlconf import get_logger

    # output is configured by the application
    assert get_logger().handlers == []
    assert get_logger('config').propagate
