"""Logging setup shared by every module of the package"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

ROOT_LOGGER_NAME = 'opensds_fake'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_configured = False


def configure_logging(level: str = 'INFO', log_format: str = None,
                      json_logs: bool = False):
    """
    Attach a stderr handler to the package root logger.

    Calling it again replaces the existing handler, so the CLI can apply
    the level and format it loaded from configuration.

    Args:
        level: Log level name
        log_format: logging format string
        json_logs: Emit one JSON object per record instead of plain text
    """
    global _configured

    log_format = log_format or DEFAULT_LOG_FORMAT

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(JsonFormatter(log_format))
    else:
        handler.setFormatter(logging.Formatter(log_format))

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package root logger.

    The first call installs the default handler; configuration files are
    only applied through configure_logging().

    Args:
        name: Usually the calling module's __name__

    Returns:
        Logger instance
    """
    if not _configured:
        configure_logging()

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
