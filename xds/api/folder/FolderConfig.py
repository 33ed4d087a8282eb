"""Public, serializable description of one folder."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ._cloudsync._Data import _Data as DataCloudSync
from ._pathmap._Data import _Data as DataPathMap
from .FolderStatus import FolderStatus
from .FolderType import FolderType

# Registry: add new backends here (ONLY place folder types are mapped to implementations)
_BACKEND_REGISTRY: dict[FolderType, str] = {
    FolderType.PATHMAP: "xds.api.folder._pathmap",
}


class FolderConfig(BaseModel):
    """Folder configuration as exchanged with clients.

    Field aliases are the JSON names used on the wire.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field("", description="Unique folder ID, assigned by the server")
    label: str = Field("", description="Human-readable name")
    client_path: str = Field("", alias="path", description="Directory as seen by the client")
    type: FolderType = Field(FolderType.PATHMAP, description="Synchronization strategy")
    status: FolderStatus = Field(FolderStatus.DISABLE, description="Whether the folder is usable")
    is_in_sync: bool = Field(False, alias="isInSync", description="Server content matches the client")
    default_sdk: str = Field("", alias="defaultSdkID", description="SDK used by build commands")
    root_path: str = Field("", alias="rootPath", description="Resolved server root")
    data_path_map: DataPathMap = Field(default_factory=DataPathMap, alias="dataPathMap")
    data_cloud_sync: DataCloudSync = Field(default_factory=DataCloudSync, alias="dataCloudSync")

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the JSON wire names."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["DataCloudSync", "DataPathMap", "FolderConfig"]
