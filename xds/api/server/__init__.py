"""HTTP binding: REST API over the folders registry."""

from ...constants import API_PREFIX
from .create_app import create_app
from .run_server import run_server

__all__ = ["API_PREFIX", "create_app", "run_server"]
