"""
Path-mapping folder implementation.

The client and the server see the same files (e.g. through a network mount),
so nothing is ever transferred: the folder only keeps the bookkeeping needed
to translate paths between the two views.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any

from ...config.XDSConfig import XDSConfig
from .._AbstractBackend import EventCallback, _AbstractBackend
from ..FolderConfig import FolderConfig
from ..FolderError import InvalidConfigError, PathUnavailableError, SanityCheckFailedError
from ..FolderStatus import FolderStatus

logger = logging.getLogger(__name__)

_DIR_MODE = 0o755
_PROBE_PREFIX = "xds_pathmap_check"
_PROBE_PAYLOAD = b"sanity check PathMap Add folder"


def _sanity_check(directory: Path) -> None:
    """Write a probe file in ``directory`` and read it back.

    The probe file is removed on every exit path.

    Raises:
        SanityCheckFailedError: On any I/O error, short write or mismatch.
    """
    try:
        fd, probe_name = tempfile.mkstemp(prefix=_PROBE_PREFIX, dir=directory)
    except OSError as e:
        raise SanityCheckFailedError(f"ServerPath sanity check error: {e}") from e

    probe = Path(probe_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            written = fh.write(_PROBE_PAYLOAD)
        if written != len(_PROBE_PAYLOAD):
            raise SanityCheckFailedError(
                f"ServerPath sanity check error: short write ({written}/{len(_PROBE_PAYLOAD)} bytes)"
            )
        if probe.read_bytes() != _PROBE_PAYLOAD:
            raise SanityCheckFailedError("ServerPath sanity check error: probe content mismatch")
    except OSError as e:
        raise SanityCheckFailedError(f"ServerPath sanity check error: {e}") from e
    finally:
        with suppress(OSError):
            probe.unlink()


class _Backend(_AbstractBackend):
    """PathMap folder: bookkeeping and path translation only."""

    def __init__(self, server_config: XDSConfig):
        self._share_root_dir = server_config.share_root_dir
        self._config = FolderConfig()

    def add(self, candidate: FolderConfig) -> FolderConfig:
        server_path = candidate.data_path_map.server_path
        if not server_path:
            raise InvalidConfigError("ServerPath must be set")
        if "\x00" in server_path:
            raise InvalidConfigError("ServerPath must not contain a NUL byte")

        # Relative server paths live under the share root
        if not os.path.isabs(server_path):
            server_path = os.path.join(self._share_root_dir, server_path)
        directory = Path(os.path.normpath(server_path))

        if not directory.is_dir():
            try:
                directory.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
            except (OSError, ValueError) as e:
                raise PathUnavailableError(f"Cannot create ServerPath directory: {directory} ({e})") from e
        if not directory.is_dir():
            raise PathUnavailableError(f"ServerPath directory is not accessible: {directory}")

        _sanity_check(directory)

        resolved = str(directory)
        config = candidate.model_copy(deep=True)
        config.root_path = resolved
        config.data_path_map.server_path = resolved
        config.is_in_sync = True
        config.status = FolderStatus.ENABLE
        self._config = config

        logger.debug("PathMap folder %s mapped %r -> %r", config.id, config.client_path, resolved)
        return config.model_copy(deep=True)

    def get_config(self) -> FolderConfig:
        return self._config.model_copy(deep=True)

    def get_full_path(self, relative: str | None = None) -> str:
        root = self._config.data_path_map.server_path
        if not relative:
            return root
        return os.path.normpath(os.path.join(root, relative.lstrip(os.sep)))

    def conv_path_cli2svr(self, path: str) -> str:
        return self._swap_prefix(path, self._config.client_path, self._config.data_path_map.server_path)

    def conv_path_svr2cli(self, path: str) -> str:
        return self._swap_prefix(path, self._config.data_path_map.server_path, self._config.client_path)

    def _swap_prefix(self, path: str, old: str, new: str) -> str:
        """Replace a leading ``old`` with ``new``; identity while either side is unset.

        Plain string prefix match with no separator boundary: with client path
        ``/home/u/p``, ``/home/u/proj2/x`` is rewritten too.
        """
        if not self._config.client_path or not self._config.data_path_map.server_path:
            return path
        if path.startswith(old):
            return new + path[len(old) :]
        return path

    def remove(self) -> None:
        # Nothing held
        pass

    def register_event_change(self, callback: EventCallback, data: Any = None) -> None:
        # No monitoring, so there is nothing to notify about
        pass

    def unregister_event_change(self) -> None:
        pass

    def sync(self) -> None:
        # Content is always current: there is no copy step
        pass

    def is_in_sync(self) -> bool:
        return True
