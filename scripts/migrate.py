#!/usr/bin/env python3
"""Apply all pending Alembic migrations to the configured database."""
import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger("migrate")

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def run_migrations(revision: str = "head") -> None:
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "alembic"))
    try:
        logger.info(f"Upgrading database to {revision}")
        command.upgrade(config, revision)
        logger.info("Migrations completed successfully")
    except SQLAlchemyError as e:
        logger.error(f"Migration failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    run_migrations(sys.argv[1] if len(sys.argv) > 1 else "head")
