"""
Roles module - Role records referenced by users.
"""

from user_service.modules.roles.models import RoleRow
from user_service.modules.roles.schemas import Role
from user_service.modules.roles.seed import DEFAULT_ROLES, seed_roles

__all__ = ["Role", "RoleRow", "DEFAULT_ROLES", "seed_roles"]
