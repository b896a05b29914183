"""Role schemas."""

from pydantic import BaseModel, ConfigDict


class Role(BaseModel):
    """Role entity as seen by callers of the persistence layer."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
