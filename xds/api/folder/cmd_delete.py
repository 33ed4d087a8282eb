"""Delete folder command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.folder import FolderDeleteOutput
from . import _client


def cmd_delete(folder_id: str, server_url: str = _client.DEFAULT_SERVER_URL) -> StageResult:
    """Delete a folder from a running server.

    Files under the folder root are left in place.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, f"Deleting folder {folder_id}...")
        try:
            folder = _client.delete_folder(server_url, folder_id)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to delete folder {folder_id}: {e}"
            result_obj.output = FolderDeleteOutput(
                errors=[str(e)],
                warnings=[],
                server_url=server_url,
                folder={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Folder {folder_id} deleted"
        result_obj.output = FolderDeleteOutput(
            errors=[],
            warnings=[],
            server_url=server_url,
            folder=folder,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Deleting folder {folder_id}...",
        progress_callback=do_work,
    )
