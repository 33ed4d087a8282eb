"""Output schemas for API commands.

Importing this package registers every domain's schemas.
"""

from . import config, folder  # noqa: F401
from ._registry import get_output_schema

__all__ = ["get_output_schema"]
