"""Configure the ``xds`` logger hierarchy from the server configuration."""

import logging
import sys
from pathlib import Path

from ...constants import LOG_FILENAME
from ..config.LogConfig import LogConfig

LOG_FORMAT = "[%(asctime)s] [%(name)s] %(levelname)s: %(message)s"

# LogConfig spells WARNING the short way
_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_HANDLER_NAME = "xds-server"


def configure_logging(log_config: LogConfig, logs_dir: str = "") -> logging.Handler:
    """Install the server log handler on the ``xds`` logger.

    Logs go to ``<logs_dir>/xds-server.log`` when a logs directory is set,
    otherwise to stderr. Calling again replaces the previous handler.

    Returns:
        The installed handler.
    """
    root = logging.getLogger("xds")
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()

    handler: logging.Handler
    if logs_dir:
        handler = logging.FileHandler(Path(logs_dir) / LOG_FILENAME, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(_LEVELS[log_config.level])
    return handler
