"""
Seed Default Roles

Creates the default roles so users can be registered against them.
Safe to run repeatedly.

Usage:
    python scripts/seed_roles.py
"""

import asyncio

from user_service.core.config import settings
from user_service.core.database import build_engine, build_session_maker
from user_service.core.logging import configure_logging
from user_service.modules.roles import seed_roles


async def main() -> None:
    """Seed the default roles into the configured database."""
    configure_logging(settings.log_level)

    engine = build_engine(settings.database_url, echo=settings.database_echo)
    try:
        role_ids = await seed_roles(build_session_maker(engine))
    finally:
        await engine.dispose()

    print("Roles ready:")
    for name, role_id in sorted(role_ids.items(), key=lambda item: item[1]):
        print(f"  {role_id}: {name}")


if __name__ == "__main__":
    asyncio.run(main())
