"""Fields shared by every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Every ``cmd_*`` output reports problems here rather than raising.

    A failed folder or config operation puts its message in ``errors`` and
    still fills in every other field of its schema.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Failure messages, empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notices (e.g. missing config file)")
