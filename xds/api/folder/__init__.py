"""Folder API module: synchronized workspaces and their registry."""

from ._AbstractBackend import EventCallback, _AbstractBackend
from .FolderConfig import DataCloudSync, DataPathMap, FolderConfig
from .FolderError import (
    FolderError,
    InvalidConfigError,
    NotFoundError,
    PathUnavailableError,
    RemoveFailedError,
    SanityCheckFailedError,
)
from .Folders import Folders
from .FolderStatus import FolderStatus
from .FolderType import FolderType

Folder = _AbstractBackend

__all__ = [
    "DataCloudSync",
    "DataPathMap",
    "EventCallback",
    "Folder",
    "FolderConfig",
    "FolderError",
    "FolderStatus",
    "FolderType",
    "Folders",
    "InvalidConfigError",
    "NotFoundError",
    "PathUnavailableError",
    "RemoveFailedError",
    "SanityCheckFailedError",
]
