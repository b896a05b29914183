"""
Users module - User identity records and their repository.
"""

# Roles must be mapped before UserRow.role can resolve
from user_service.modules.roles.models import RoleRow  # noqa: F401
from user_service.modules.users.models import UserRow
from user_service.modules.users.repository import UserRepository, UserRepositoryProtocol
from user_service.modules.users.schemas import (
    RegisterRequest,
    UpdatedUser,
    UpdateRequest,
    User,
)

__all__ = [
    "User",
    "UserRow",
    "RegisterRequest",
    "UpdateRequest",
    "UpdatedUser",
    "UserRepository",
    "UserRepositoryProtocol",
]
