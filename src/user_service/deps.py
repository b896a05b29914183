"""
FastAPI dependencies.

Routers of the larger service receive the repository registry from here:

    @router.get("/users/{uuid}")
    async def get_user(uuid: str, registry: RepositoryRegistryProtocol = Depends(get_registry)):
        return await registry.get_user().find_by_uuid(uuid)
"""

from user_service.core.config import settings
from user_service.core.database import get_session_maker
from user_service.modules.registry import RepositoryRegistryProtocol, new_repository_registry


def get_registry() -> RepositoryRegistryProtocol:
    """Return a registry bound to the application's session factory."""
    return new_repository_registry(
        get_session_maker(),
        timeout=settings.repository_timeout_seconds,
    )
