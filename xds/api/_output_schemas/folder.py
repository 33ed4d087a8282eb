"""Output schemas for folder commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class FolderListOutput(BaseOutputSchema):
    """Output schema for folder list command."""

    server_url: str = Field(..., description="Server the folders were read from")
    folders: list[dict[str, Any]] = Field(..., description="Folder configurations, in registration order")
    count: int = Field(..., description="Number of folders")


class FolderShowOutput(BaseOutputSchema):
    """Output schema for folder show command."""

    server_url: str = Field(..., description="Server the folder was read from")
    folder: dict[str, Any] = Field(..., description="Folder configuration, empty dict if not found")


class FolderAddOutput(BaseOutputSchema):
    """Output schema for folder add command."""

    server_url: str = Field(..., description="Server the folder was added to")
    folder: dict[str, Any] = Field(..., description="New folder configuration, empty dict on failure")


class FolderSyncOutput(BaseOutputSchema):
    """Output schema for folder sync command."""

    server_url: str = Field(..., description="Server the sync was requested from")
    id: str = Field(..., description="Folder ID")
    synced: bool = Field(..., description="Whether the synchronization pass succeeded")


class FolderDeleteOutput(BaseOutputSchema):
    """Output schema for folder delete command."""

    server_url: str = Field(..., description="Server the folder was deleted from")
    folder: dict[str, Any] = Field(..., description="Deleted folder configuration, empty dict on failure")


register_output_schema("folder", "list", FolderListOutput)
register_output_schema("folder", "show", FolderShowOutput)
register_output_schema("folder", "add", FolderAddOutput)
register_output_schema("folder", "sync", FolderSyncOutput)
register_output_schema("folder", "delete", FolderDeleteOutput)
