"""Config API module: server settings and startup bootstrap."""

from .ConfigError import ConfigError
from .init_config import init_config
from .LogConfig import LogConfig
from .XDSConfig import XDSConfig

__all__ = ["ConfigError", "LogConfig", "XDSConfig", "init_config"]
