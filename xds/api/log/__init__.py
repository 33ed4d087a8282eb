"""Log API module."""

from .configure_logging import LOG_FORMAT, configure_logging

__all__ = ["LOG_FORMAT", "configure_logging"]
