"""
Repository Registry

The single construction point for repositories. The registry holds only the
shared session factory and hands out repositories bound to it, which keeps
wiring in one place and lets tests substitute their own registry.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_service.modules.users.repository import UserRepository, UserRepositoryProtocol


class RepositoryRegistryProtocol(Protocol):
    """Factory of repositories."""

    def get_user(self) -> UserRepositoryProtocol: ...


class RepositoryRegistry:
    """Registry binding the shared session factory to repository instances."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        timeout: float | None = None,
    ) -> None:
        self._session_maker = session_maker
        self._timeout = timeout

    def get_user(self) -> UserRepositoryProtocol:
        """Return a user repository bound to the shared session factory."""
        return UserRepository(self._session_maker, timeout=self._timeout)


def new_repository_registry(
    session_maker: async_sessionmaker[AsyncSession],
    timeout: float | None = None,
) -> RepositoryRegistryProtocol:
    """Build the registry for a session factory."""
    return RepositoryRegistry(session_maker, timeout=timeout)
