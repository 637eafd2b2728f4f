"""
Create the database schema and the default administrator for first login.
"""
import asyncio

from portpass.core.config import get_settings
from portpass.core.container import ApplicationContainer
from portpass.core.logging import configure_logging
from portpass.modules.staff.seeder import ensure_default_admin
from portpass.infrastructure.database.session import init_db


async def create_default_admin():
    """Create the default admin account if no staff exist."""
    settings = get_settings()
    configure_logging(settings)
    container = ApplicationContainer.build(settings)
    try:
        await init_db(container.engine)
        admin = await ensure_default_admin(container.store, settings.seed)
    finally:
        await container.shutdown()

    if admin is None:
        print("Staff accounts already exist, nothing to initialise")
        return

    print("=" * 50)
    print("Default administrator created")
    print("=" * 50)
    print(f"Username: {admin.username}")
    print(f"Password: {settings.seed.password}")
    print("=" * 50)
    print("Change the password after the first login!")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(create_default_admin())
