"""CloudSync-specific folder configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """Client side of a transfer-based sync.

    Clients send it with every add request, whatever the folder type. It is
    stored as given; PathMap folders do not use it.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    sync_thing_id: str = Field("", alias="syncThingID", description="ID of the client's sync agent")
