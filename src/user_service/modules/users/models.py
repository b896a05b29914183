"""
User Models

Storage mapping for user identity records. The shape of the table is owned
by the Alembic migrations; this mapping mirrors it for queries.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from user_service.modules.shared import BaseModel

if TYPE_CHECKING:
    from user_service.modules.roles.models import RoleRow


class UserRow(BaseModel):
    """
    Persistence model for users.

    ``id`` is the internal surrogate key. ``uuid`` is the public handle and
    is written once, at insert time.
    """

    __tablename__ = "users"

    uuid: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        unique=True,
        nullable=False,
    )

    # Profile fields
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    username: Mapped[str] = mapped_column(
        String,
        index=True,
        nullable=False,
    )
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    phone_number: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
    )

    # Role assignment
    # ON UPDATE/DELETE CASCADE: users follow their role's lifecycle
    role_id: Mapped[int] = mapped_column(
        ForeignKey("roles.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    role: Mapped["RoleRow"] = relationship(
        "RoleRow",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<UserRow(id={self.id}, uuid={self.uuid}, username={self.username})>"
