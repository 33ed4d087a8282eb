"""Show folder command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.folder import FolderShowOutput
from . import _client


def cmd_show(folder_id: str, server_url: str = _client.DEFAULT_SERVER_URL) -> StageResult:
    """Show one folder's configuration."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, f"Fetching folder {folder_id}...")
        try:
            folder = _client.get_folder(server_url, folder_id)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to show folder {folder_id}: {e}"
            result_obj.output = FolderShowOutput(
                errors=[str(e)],
                warnings=[],
                server_url=server_url,
                folder={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Folder {folder_id}: {folder.get('status', '')}"
        result_obj.output = FolderShowOutput(
            errors=[],
            warnings=[],
            server_url=server_url,
            folder=folder,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing folder {folder_id}...",
        progress_callback=do_work,
    )
