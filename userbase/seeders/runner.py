from __future__ import annotations

import logging

from sqlmodel import Session

import userbase.core.db as db_module
from userbase.core.config import ENV_FILE, settings
from userbase.seeders.database_seeder import DatabaseSeeder

logger = logging.getLogger(__name__)


def run(seeder: DatabaseSeeder | None = None) -> None:
    """Create missing tables and run the database seeder once."""
    logger.info("ENV_FILE=%s database=%s", ENV_FILE, db_module.engine.url)
    db_module.init_db()

    seeder = seeder or DatabaseSeeder()
    with Session(db_module.engine) as session:
        seeder.run(session)
    logger.info("done")


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="[seed] %(levelname)s %(name)s: %(message)s",
    )
    try:
        run()
    except Exception:
        logger.exception("seeding failed")
        raise


if __name__ == "__main__":
    main()
