#!/usr/bin/env python3
"""
Initialize the Lenslocked database.

Creates missing tables. With --reset, drops every table first
(refused in production).
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("lenslocked.init_db")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--reset", action="store_true", help="drop and recreate every table"
    )
    args = parser.parse_args(argv)

    from sqlalchemy import inspect
    from sqlalchemy.exc import SQLAlchemyError

    from domain.models.database import destructive_reset, engine, init_database

    try:
        if args.reset:
            destructive_reset()
        else:
            init_database()
    except (SQLAlchemyError, RuntimeError) as exc:
        logger.error("database_init_failed error=%s", exc)
        return 1

    tables = inspect(engine).get_table_names()
    logger.info("database_ready tables=%s", ", ".join(tables))
    return 0


if __name__ == "__main__":
    sys.exit(main())
