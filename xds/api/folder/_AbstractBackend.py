"""Abstract base class for folder implementations."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .FolderConfig import FolderConfig

# Receives the folder's current config and the opaque data given at registration
EventCallback = Callable[["FolderConfig", Any], None]


class _AbstractBackend(ABC):
    """Interface every folder synchronization strategy satisfies.

    Failures are reported by raising a ``FolderError`` subclass.
    """

    # Whether register_event_change() actually delivers notifications
    events_supported: bool = False

    @abstractmethod
    def add(self, candidate: "FolderConfig") -> "FolderConfig":
        """Validate and activate the folder described by ``candidate``.

        Returns:
            The finalized configuration (root path resolved, status set).

        Raises:
            InvalidConfigError: Required fields are missing.
            PathUnavailableError: Target directory cannot be created or accessed.
            SanityCheckFailedError: Write probe in the target directory failed.
        """

    @abstractmethod
    def get_config(self) -> "FolderConfig":
        """Snapshot of the latest committed configuration."""

    @abstractmethod
    def get_full_path(self, relative: str | None = None) -> str:
        """Server-side path of ``relative``; the root itself when empty."""

    @abstractmethod
    def conv_path_cli2svr(self, path: str) -> str:
        """Translate a client path to the server view."""

    @abstractmethod
    def conv_path_svr2cli(self, path: str) -> str:
        """Translate a server path to the client view."""

    @abstractmethod
    def remove(self) -> None:
        """Release held resources. Calling it twice is not an error."""

    @abstractmethod
    def register_event_change(self, callback: EventCallback, data: Any = None) -> None:
        """Register the single receiver of content-change notifications.

        A new registration replaces the previous one.
        """

    @abstractmethod
    def unregister_event_change(self) -> None:
        """Drop the registered receiver, if any."""

    @abstractmethod
    def sync(self) -> None:
        """Force a synchronization pass.

        Raises only for failures of this call's synchronous portion. Variants
        that transfer data own their timeout and cancellation policy and report
        cancellation as an error.
        """

    @abstractmethod
    def is_in_sync(self) -> bool:
        """Current sync state, without forcing a new pass."""
