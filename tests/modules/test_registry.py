"""
Unit tests for the repository registry.
"""

from uuid import uuid4

import pytest

from user_service.core.errors import UserNotFoundError
from user_service.modules.registry import (
    RepositoryRegistry,
    RepositoryRegistryProtocol,
    new_repository_registry,
)
from user_service.modules.users.repository import UserRepository
from user_service.modules.users.schemas import UpdatedUser, UpdateRequest, User


class TestRepositoryRegistry:
    """Tests for RepositoryRegistry."""

    def test_get_user_binds_shared_session_maker(self, mock_session_maker):
        registry = RepositoryRegistry(mock_session_maker, timeout=3.0)

        repo = registry.get_user()

        assert isinstance(repo, UserRepository)
        assert repo._session_maker is mock_session_maker
        assert repo._timeout == 3.0

    def test_get_user_returns_independent_instances(self, mock_session_maker):
        registry = RepositoryRegistry(mock_session_maker)
        assert registry.get_user() is not registry.get_user()

    def test_new_repository_registry(self, mock_session_maker):
        registry = new_repository_registry(mock_session_maker, timeout=1.0)
        assert isinstance(registry, RepositoryRegistry)
        assert registry.get_user()._timeout == 1.0

    @pytest.mark.asyncio
    async def test_repositories_share_storage(self, session_maker, sample_register_request):
        """A user registered through one repository is visible through another."""
        registry = new_repository_registry(session_maker)

        created = await registry.get_user().register(sample_register_request)
        found = await registry.get_user().find_by_uuid(created.uuid)

        assert found.id == created.id


class _InMemoryUserRepository:
    """Minimal stand-in satisfying the repository protocol."""

    def __init__(self):
        self.users = {}

    async def register(self, request):
        user = User(id=len(self.users) + 1, uuid=uuid4(), **request.model_dump())
        self.users[user.uuid] = user
        return user

    async def update(self, request, uuid):
        user = await self.find_by_uuid(uuid)
        changes = request.changes()
        self.users[user.uuid] = user.model_copy(update=changes)
        return UpdatedUser(uuid=user.uuid, **changes)

    async def find_by_username(self, username):
        return self._first("username", username)

    async def find_by_email(self, email):
        return self._first("email", email)

    async def find_by_uuid(self, uuid):
        if uuid not in self.users:
            raise UserNotFoundError("uuid", uuid)
        return self.users[uuid]

    def _first(self, field, value):
        for user in self.users.values():
            if getattr(user, field) == value:
                return user
        raise UserNotFoundError(field, value)


class _FakeRegistry:
    def __init__(self, repo):
        self.repo = repo

    def get_user(self):
        return self.repo


async def _load_user(registry: RepositoryRegistryProtocol, uuid):
    return await registry.get_user().find_by_uuid(uuid)


class TestSubstitution:
    """Consumers depend only on the registry protocol."""

    @pytest.mark.asyncio
    async def test_consumer_works_with_substitute_registry(self, sample_register_request):
        registry = _FakeRegistry(_InMemoryUserRepository())
        created = await registry.get_user().register(sample_register_request)

        assert await _load_user(registry, created.uuid) == created

        with pytest.raises(UserNotFoundError):
            await _load_user(registry, uuid4())

    @pytest.mark.asyncio
    async def test_substitute_supports_every_operation(self, sample_register_request):
        """register, update and the three lookups all work without a database."""
        registry = _FakeRegistry(_InMemoryUserRepository())
        repo = registry.get_user()

        created = await repo.register(sample_register_request)
        updated = await repo.update(UpdateRequest(name="Ann K."), created.uuid)

        assert isinstance(created, User)
        assert updated == UpdatedUser(uuid=created.uuid, name="Ann K.")
        assert (await repo.find_by_username("ann1")).name == "Ann K."
        assert (await repo.find_by_email("ann@x.io")).uuid == created.uuid

        with pytest.raises(UserNotFoundError):
            await repo.update(UpdateRequest(name="Nobody"), uuid4())
