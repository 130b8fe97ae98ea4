"""Seed Admin — create the initial admin account (console command blogapi-seed-admin).

Invariants:
    - Idempotent: an existing account with the admin email is left untouched
    - Credentials come from settings (ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME)
"""

import asyncio
import logging

from blogapi.config import get_settings
from blogapi.db.session import create_session_factory
from blogapi.infrastructure.observability import setup_logging
from blogapi.services.accounts import AccountService

logger = logging.getLogger(__name__)


async def seed_admin() -> bool:
    settings = get_settings()
    session_factory = create_session_factory(settings.database_url)
    try:
        async with session_factory() as db:
            return await AccountService(db).seed_admin(
                settings.admin_email, settings.admin_password, settings.admin_name,
            )
    finally:
        await session_factory.kw["bind"].dispose()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    created = asyncio.run(seed_admin())
    if created:
        logger.info(f"Admin user created: {settings.admin_email}")
    else:
        logger.info(f"Admin user already exists: {settings.admin_email}")


if __name__ == "__main__":
    main()
