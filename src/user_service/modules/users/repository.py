"""
User Repository

Database operations for user identity records.

Every operation opens its own session from the shared session factory, so a
repository instance carries no per-call state and can be used from many
tasks at once. Storage failures are logged and re-raised as
``PersistenceError``; the engine exception is kept only as ``__cause__``.
Cancelling the calling task aborts the in-flight statement.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol
from uuid import UUID, uuid4

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_service.core.errors import PersistenceError, UserNotFoundError
from user_service.modules.users.models import UserRow
from user_service.modules.users.schemas import (
    RegisterRequest,
    UpdatedUser,
    UpdateRequest,
    User,
)

logger = logging.getLogger(__name__)


class UserRepositoryProtocol(Protocol):
    """Operations callers may rely on, independent of the storage engine."""

    async def register(self, request: RegisterRequest) -> User: ...

    async def update(self, request: UpdateRequest, uuid: UUID | str) -> UpdatedUser: ...

    async def find_by_username(self, username: str) -> User: ...

    async def find_by_email(self, email: str) -> User: ...

    async def find_by_uuid(self, uuid: UUID | str) -> User: ...


def _parse_uuid(value: UUID | str) -> UUID | None:
    """Return value as a UUID, or None if it is not one."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class UserRepository:
    """Repository for user database operations."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        timeout: float | None = None,
    ) -> None:
        self._session_maker = session_maker
        self._timeout = timeout

    @asynccontextmanager
    async def _session(self, action: str) -> AsyncIterator[AsyncSession]:
        """
        Open a session for one operation and normalize its failures.

        Args:
            action: Verb used in the log line and error message

        Raises:
            PersistenceError: On any SQLAlchemy error, connection error or timeout
        """
        try:
            async with asyncio.timeout(self._timeout):
                async with self._session_maker() as db:
                    yield db
        except TimeoutError as e:
            logger.error(f"Timed out after {self._timeout}s trying to {action} user")
            raise PersistenceError(f"Failed to {action} user") from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action} user: {e.__class__.__name__}")
            raise PersistenceError(f"Failed to {action} user") from e
        except OSError as e:
            # Connect-time failures from the driver are not wrapped by SQLAlchemy
            logger.error(f"Could not reach the database to {action} user: {e.__class__.__name__}")
            raise PersistenceError(f"Failed to {action} user") from e

    async def register(self, request: RegisterRequest) -> User:
        """
        Create a new user record.

        Args:
            request: Validated registration data (password already hashed)

        Returns:
            The persisted user with generated id, uuid and timestamps

        Raises:
            PersistenceError: If the insert fails, including an unknown role_id
        """
        row = UserRow(
            uuid=uuid4(),
            name=request.name,
            username=request.username,
            password=request.password,
            phone_number=request.phone_number,
            email=request.email,
            role_id=request.role_id,
        )

        async with self._session("register") as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            await db.refresh(row, attribute_names=["role"])
            user = User.model_validate(row)

        logger.info(f"Registered user: {user.uuid} ({user.username})")
        return user

    async def update(self, request: UpdateRequest, uuid: UUID | str) -> UpdatedUser:
        """
        Replace the submitted fields of the user identified by ``uuid``.

        ``id``, ``uuid``, ``role_id`` and ``created_at`` are never written.
        The row is not re-read; fetch it again for the stored state.

        Args:
            request: Fields to replace; unset fields are left alone
            uuid: Public identifier of the target user

        Returns:
            The submitted values keyed by the target uuid

        Raises:
            UserNotFoundError: If no user has that uuid
            PersistenceError: If the write fails
        """
        target = _parse_uuid(uuid)
        if target is None:
            raise UserNotFoundError("uuid", uuid)

        changes = request.changes()

        async with self._session("update") as db:
            result = await db.execute(
                update(UserRow)
                .where(UserRow.uuid == target)
                .values(**changes, updated_at=func.now())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise UserNotFoundError("uuid", target)
            await db.commit()

        logger.info(f"Updated user {target}: {', '.join(sorted(changes)) or 'no fields'}")
        return UpdatedUser(uuid=target, **changes)

    async def find_by_username(self, username: str) -> User:
        """Get the first user with this exact username."""
        return await self._find_one("username", username)

    async def find_by_email(self, email: str) -> User:
        """Get the first user with this exact email address."""
        return await self._find_one("email", email)

    async def find_by_uuid(self, uuid: UUID | str) -> User:
        """Get the user with this public identifier."""
        target = _parse_uuid(uuid)
        if target is None:
            raise UserNotFoundError("uuid", uuid)
        return await self._find_one("uuid", target)

    async def _find_one(self, field: str, value: str | UUID) -> User:
        column = getattr(UserRow, field)
        async with self._session("find") as db:
            result = await db.execute(
                select(UserRow).where(column == value).order_by(UserRow.id).limit(1)
            )
            row = result.scalars().first()
            if row is None:
                raise UserNotFoundError(field, value)
            return User.model_validate(row)
