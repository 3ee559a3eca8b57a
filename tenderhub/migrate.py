import asyncio

import asyncpg
from alembic import command
from alembic.config import Config

from tenderhub.core.config import settings
from tenderhub.core.logging_config import logger

DB_WAIT_RETRIES = 5
DB_WAIT_SECONDS = 2


async def wait_for_db():
    """Blocks until Postgres accepts connections, e.g. while its container boots."""
    dsn = settings.DATABASE_URL.replace("postgresql+asyncpg://", "postgresql://")
    for attempt in range(1, DB_WAIT_RETRIES + 1):
        try:
            conn = await asyncpg.connect(dsn)
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Database not reachable, attempt {attempt}/{DB_WAIT_RETRIES}: {e}")
            await asyncio.sleep(DB_WAIT_SECONDS)
            continue
        await conn.close()
        logger.info(f"Database {settings.POSTGRES_HOST}:{settings.POSTGRES_PORT} is ready")
        return
    raise ConnectionError(f"Database did not come up after {DB_WAIT_RETRIES} attempts")


def apply_migrations(revision: str = "head"):
    if settings.DATABASE_URL.startswith("postgresql"):
        asyncio.run(wait_for_db())

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    logger.info(f"Upgrading schema to {revision}")
    command.upgrade(alembic_cfg, revision)
    logger.info("Schema is up to date")


if __name__ == "__main__":
    apply_migrations()
