"""
User Schemas

Plain data types exchanged with the repository: the request shapes it
accepts and the entity it returns. None of these carry storage metadata.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from user_service.modules.roles.schemas import Role


class RegisterRequest(BaseModel):
    """
    Data for a new user.

    Values are stored as given: ``password`` is hashed and ``email`` is
    validated before this layer.
    """

    name: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., min_length=1, max_length=15)
    email: str = Field(..., min_length=1, max_length=100)
    role_id: int = Field(..., gt=0)


class UpdateRequest(BaseModel):
    """Replacement values for an existing user. Unset or empty fields are left alone."""

    name: str | None = Field(None, max_length=100)
    username: str | None = None
    password: str | None = Field(None, max_length=255)
    phone_number: str | None = Field(None, max_length=15)
    email: str | None = Field(None, max_length=100)

    @field_validator("*", mode="before")
    @classmethod
    def blank_means_unchanged(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value

    def changes(self) -> dict[str, str]:
        """Return the fields that carry a value to write."""
        return self.model_dump(exclude_none=True)


class UpdatedUser(BaseModel):
    """The submitted values of an update, keyed by the target user's uuid."""

    uuid: UUID
    name: str | None = None
    username: str | None = None
    password: str | None = Field(None, repr=False)
    phone_number: str | None = None
    email: str | None = None


class User(BaseModel):
    """User entity returned by the repository."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: UUID
    name: str
    username: str
    password: str = Field(repr=False)
    phone_number: str
    email: str
    role_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    role: Role | None = None
