"""Folder usability status."""

from enum import Enum


class FolderStatus(str, Enum):
    """Whether a folder is currently usable."""

    ENABLE = "Enable"
    DISABLE = "Disable"
    ERROR_CONFIG = "ErrorConfig"
    PAUSE = "Pause"
    SYNCING = "Syncing"
