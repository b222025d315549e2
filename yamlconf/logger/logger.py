import logging

module_logger = logging.getLogger('yamlconf')


def get_logger(suffix: str = '') -> logging.Logger:
    """Get the logger of a yamlconf module

    Messages go through the standard logging tree under "yamlconf", yamlconf
    never adds handlers, so output is configured by the application.

    Args:
        suffix (str, optional): module name, e.g. "config" gives "yamlconf.config".
            Defaults to '', which returns the "yamlconf" logger itself.

    Returns:
        logging.Logger: logger
    """
    if not suffix:
        return module_logger
    return module_logger.getChild(suffix)
