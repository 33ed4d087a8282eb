"""Folder error taxonomy.

Every per-request failure of the folder layer is one of these; none of them
is fatal to the server.
"""


class FolderError(Exception):
    """Base class for folder errors."""


class InvalidConfigError(FolderError):
    """Malformed or incomplete caller-supplied folder configuration."""


class PathUnavailableError(FolderError):
    """Target directory missing and uncreatable, or inaccessible."""


class SanityCheckFailedError(FolderError):
    """Write/read probe in the target directory failed."""


class NotFoundError(FolderError):
    """Unknown folder ID."""


class RemoveFailedError(FolderError):
    """Variant-specific teardown failed."""
