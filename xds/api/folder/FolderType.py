"""Folder type discriminator selecting the synchronization strategy."""

from enum import IntEnum


class FolderType(IntEnum):
    """Folder synchronization strategies (JSON wire values are integers)."""

    PATHMAP = 1  # client and server share a filesystem view
    CLOUDSYNC = 2  # transfer-based sync agent
