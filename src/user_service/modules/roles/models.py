"""
Role Models

Storage mapping for roles. Users reference roles through ``users.role_id``.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from user_service.modules.shared import BaseModel


class RoleRow(BaseModel):
    """Persistence model for roles."""

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<RoleRow(id={self.id}, name={self.name})>"
