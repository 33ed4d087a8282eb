"""Sync folder command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.folder import FolderSyncOutput
from . import _client


def cmd_sync(folder_id: str, server_url: str = _client.DEFAULT_SERVER_URL) -> StageResult:
    """Force a synchronization pass on one folder."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, f"Synchronizing folder {folder_id}...")
        try:
            _client.sync_folder(server_url, folder_id)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to sync folder {folder_id}: {e}"
            result_obj.output = FolderSyncOutput(
                errors=[str(e)],
                warnings=[],
                server_url=server_url,
                id=folder_id,
                synced=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Folder {folder_id} synchronized"
        result_obj.output = FolderSyncOutput(
            errors=[],
            warnings=[],
            server_url=server_url,
            id=folder_id,
            synced=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Syncing folder {folder_id}...",
        progress_callback=do_work,
    )
