"""
Role Seeding

Inserts the default roles so that user registration has valid ``role_id``
targets in a fresh database. Safe to run repeatedly.
"""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_service.core.errors import PersistenceError
from user_service.modules.roles.models import RoleRow

logger = logging.getLogger(__name__)

DEFAULT_ROLES: tuple[str, ...] = ("admin", "customer")


async def seed_roles(
    session_maker: async_sessionmaker[AsyncSession],
    names: Iterable[str] = DEFAULT_ROLES,
) -> dict[str, int]:
    """
    Ensure every named role exists.

    Args:
        session_maker: Shared session factory
        names: Role names to create when missing

    Returns:
        Mapping of role name to role id for every requested name

    Raises:
        PersistenceError: If the roles cannot be read or written, or the
            database is unreachable
    """
    wanted = list(dict.fromkeys(names))
    try:
        async with session_maker() as db:
            result = await db.execute(select(RoleRow.name).where(RoleRow.name.in_(wanted)))
            existing = set(result.scalars().all())

            missing = [name for name in wanted if name not in existing]
            if missing:
                db.add_all(RoleRow(name=name) for name in missing)
                await db.commit()
                logger.info(f"Seeded roles: {', '.join(missing)}")

            result = await db.execute(
                select(RoleRow.name, RoleRow.id).where(RoleRow.name.in_(wanted))
            )
            return {name: role_id for name, role_id in result.all()}
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Failed to seed roles: {e}")
        raise PersistenceError("Failed to seed roles") from e
