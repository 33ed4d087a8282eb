"""Folders manager: the registry of active folders."""

import json
import logging
import threading
import uuid
from contextlib import suppress
from pathlib import Path

from pydantic import ValidationError

from ..config.XDSConfig import XDSConfig
from ._AbstractBackend import _AbstractBackend
from .FolderConfig import _BACKEND_REGISTRY, FolderConfig
from .FolderError import FolderError, InvalidConfigError, NotFoundError, RemoveFailedError
from .FolderType import FolderType

logger = logging.getLogger(__name__)


class Folders:
    """Owns every active folder and is the only component that mutates the registry.

    Built once at start-up and handed to whatever serves requests. All public
    methods are thread-safe. Registry lookups, insertions and deletions happen
    under one lock; a variant's own ``add``/``sync`` work runs outside it.

    When ``server_config.folders_file`` is set, the registry is written there
    after every successful add or delete.
    """

    def __init__(self, server_config: XDSConfig):
        self.server_config = server_config
        self.folders_file = Path(server_config.folders_file) if server_config.folders_file else None
        self._folders: dict[str, _AbstractBackend] = {}
        # Every ID ever handed out, so a deleted folder's ID is never reused
        self._issued_ids: set[str] = set()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._folders)

    def __contains__(self, folder_id: object) -> bool:
        with self._lock:
            return folder_id in self._folders

    def _reserve_id(self, folder_id: str | None = None) -> str:
        with self._lock:
            if folder_id is not None:
                if folder_id in self._issued_ids:
                    raise InvalidConfigError(f"Folder ID already used: {folder_id}")
                self._issued_ids.add(folder_id)
                return folder_id
            while True:
                new_id = str(uuid.uuid1())
                if new_id not in self._issued_ids:
                    self._issued_ids.add(new_id)
                    return new_id

    def _new_backend(self, folder_type: FolderType) -> _AbstractBackend:
        module_name = _BACKEND_REGISTRY.get(folder_type)
        if module_name is None:
            supported = [t.name for t in _BACKEND_REGISTRY]
            raise InvalidConfigError(f"Unsupported folder type: {folder_type!r} (supported: {supported})")

        # Pattern: xds.api.folder._<type>._Backend
        module = __import__(f"{module_name}._Backend", fromlist=[""])
        return module._Backend(self.server_config)

    def _add(self, cfg: FolderConfig, folder_id: str | None, save: bool = True) -> FolderConfig:
        backend = self._new_backend(cfg.type)
        new_id = self._reserve_id(folder_id)
        candidate = cfg.model_copy(update={"id": new_id}, deep=True)

        new_cfg = backend.add(candidate)

        with self._lock:
            self._folders[new_id] = backend
            if save:
                self._save()
        logger.info("Folder added: id=%s root=%s", new_id, new_cfg.root_path)
        return new_cfg

    def add(self, cfg: FolderConfig) -> FolderConfig:
        """Create and register a folder from a caller-supplied configuration.

        A fresh ID is always generated; any ``id`` in ``cfg`` is ignored.
        The registry is unchanged when the variant rejects the configuration.

        Raises:
            FolderError: Whatever the variant's ``add`` raised.
        """
        return self._add(cfg, None)

    def get(self, folder_id: str) -> _AbstractBackend | None:
        """Return the folder registered under ``folder_id``, None if unknown."""
        with self._lock:
            return self._folders.get(folder_id)

    def get_config_arr(self) -> list[FolderConfig]:
        """Snapshot of every folder's configuration, in registration order."""
        with self._lock:
            folders = list(self._folders.values())
        return [folder.get_config() for folder in folders]

    def force_sync(self, folder_id: str) -> None:
        """Run a synchronization pass on one folder.

        Raises:
            NotFoundError: Unknown ID.
            FolderError: Whatever the variant's ``sync`` raised.
        """
        folder = self.get(folder_id)
        if folder is None:
            raise NotFoundError(f"Invalid id: {folder_id}")
        folder.sync()
        logger.debug("Folder synced: id=%s", folder_id)

    def delete(self, folder_id: str) -> FolderConfig:
        """Remove a folder and return its last configuration.

        A failed ``remove`` leaves the folder registered, so deletion can be retried.

        Raises:
            NotFoundError: Unknown ID.
            RemoveFailedError: The variant's teardown failed.
        """
        with self._lock:
            folder = self._folders.get(folder_id)
            if folder is None:
                raise NotFoundError(f"Invalid id: {folder_id}")
            try:
                folder.remove()
            except FolderError:
                raise
            except Exception as e:
                raise RemoveFailedError(f"Cannot remove folder {folder_id}: {e}") from e
            deleted = folder.get_config()
            del self._folders[folder_id]
            self._save()
        logger.info("Folder deleted: id=%s", folder_id)
        return deleted

    def save_config(self, path: Path) -> None:
        """Write every folder's configuration to ``path`` as a JSON array.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        data = [cfg.to_dict() for cfg in self.get_config_arr()]
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(data, fh, indent=4)
            temp_path.replace(path)
        except OSError:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise

    def load_config(self, path: Path) -> int:
        """Re-register the folders stored in ``path``, keeping their IDs.

        Entries that are malformed or that their variant rejects are logged
        and skipped.

        Returns:
            Number of folders registered.
        """
        if not path.exists():
            return 0
        try:
            with path.open() as fh:
                entries = json.load(fh)
        except json.JSONDecodeError as e:
            raise InvalidConfigError(f"Invalid JSON in folders file {path}: {e}") from e
        if not isinstance(entries, list):
            raise InvalidConfigError(f"Folders file {path} must hold a JSON array")

        loaded = 0
        for entry in entries:
            try:
                cfg = FolderConfig.model_validate(entry)
                self._add(cfg, cfg.id or None, save=False)
            except (ValidationError, FolderError) as e:
                logger.warning("Skipping folder from %s: %s", path, e)
                continue
            loaded += 1
        logger.info("Loaded %d folder(s) from %s", loaded, path)
        return loaded

    def _save(self) -> None:
        if self.folders_file is None:
            return
        try:
            self.save_config(self.folders_file)
        except OSError as e:
            # The in-memory registry stays authoritative
            logger.error("Cannot save folders to %s: %s", self.folders_file, e)
