"""PathMap-specific folder configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """Server side of a path mapping.

    ``server_path`` may be relative to the share root when submitted; it is
    absolute once the folder has been added.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    server_path: str = Field("", alias="serverPath", description="Directory as seen by the server")
