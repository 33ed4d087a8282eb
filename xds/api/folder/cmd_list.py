"""List folders command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.folder import FolderListOutput
from . import _client


def cmd_list(server_url: str = _client.DEFAULT_SERVER_URL) -> StageResult:
    """List the folders registered on a running server.

    Returns:
        StageResult with the folder configurations, in registration order
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Querying server...")
        try:
            folders = _client.get_folders(server_url)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to list folders: {e}"
            result_obj.output = FolderListOutput(
                errors=[str(e)],
                warnings=[],
                server_url=server_url,
                folders=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(folders)} folder(s)"
        result_obj.output = FolderListOutput(
            errors=[],
            warnings=[],
            server_url=server_url,
            folders=folders,
            count=len(folders),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing folders...",
        progress_callback=do_work,
    )
