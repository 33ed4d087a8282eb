"""Load the server configuration on start-up and prepare its directories."""

import logging
from pathlib import Path

from .ConfigError import ConfigError
from .XDSConfig import XDSConfig

logger = logging.getLogger(__name__)

# Mode used for directories created on first run
_DIR_MODE = 0o770


def _ensure_dir(path: Path, what: str) -> None:
    if path.is_dir():
        return
    try:
        path.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create {what} {path}: {e}") from e


def init_config(path: Path | str | None = None) -> XDSConfig:
    """Load the configuration and make sure mandatory directories exist.

    The share root directory is always created; the logs directory only when
    one is configured.

    Raises:
        ConfigError: Invalid config file, or a directory cannot be created.
            Callers treat this as fatal.
    """
    config = XDSConfig.load(path)

    _ensure_dir(Path(config.share_root_dir), "share root directory")
    logger.info("Share root directory: %s", config.share_root_dir)

    if config.logs_dir:
        _ensure_dir(Path(config.logs_dir), "logs directory")
    logger.info("Logs directory: %s", config.logs_dir or "<stderr>")

    return config
