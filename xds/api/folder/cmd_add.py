"""Add folder command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.folder import FolderAddOutput
from . import _client
from .FolderConfig import FolderConfig
from .FolderType import FolderType


def cmd_add(
    server_path: str,
    client_path: str = "",
    label: str = "",
    default_sdk: str = "",
    folder_type: FolderType = FolderType.PATHMAP,
    server_url: str = _client.DEFAULT_SERVER_URL,
) -> StageResult:
    """Register a new folder on a running server.

    Args:
        server_path: Server directory, absolute or relative to the server's share root
        client_path: Same directory as seen by the client, empty when no translation is needed
        label: Human-readable name
        default_sdk: SDK used by build commands, empty lets the server pick one
        folder_type: Synchronization strategy
        server_url: Base URL of the server
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Validating folder configuration...")
        try:
            candidate = FolderConfig.model_validate(
                {
                    "label": label,
                    "path": client_path,
                    "type": folder_type,
                    "defaultSdkID": default_sdk,
                    "dataPathMap": {"serverPath": server_path},
                }
            )
            yield (0.5, "Adding folder...")
            folder = _client.add_folder(server_url, candidate.to_dict())
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to add folder: {e}"
            result_obj.output = FolderAddOutput(
                errors=[str(e)],
                warnings=[],
                server_url=server_url,
                folder={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Folder {folder.get('id', '')} added at {folder.get('rootPath', '')}"
        result_obj.output = FolderAddOutput(
            errors=[],
            warnings=[],
            server_url=server_url,
            folder=folder,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Adding folder {server_path}...",
        progress_callback=do_work,
    )
