"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.simple_db import SimpleDb
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Wise sayings: one quote and its author per row
CREATE TABLE IF NOT EXISTS wise_saying (
    id              SERIAL PRIMARY KEY,
    content         TEXT NOT NULL,
    author          VARCHAR(100) NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_wise_saying_author ON wise_saying(author);
"""


def create_tables(db: SimpleDb) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        db.run(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


def truncate_tables(db: SimpleDb) -> None:
    """Remove every row and restart id generation at 1."""
    db.run("TRUNCATE wise_saying RESTART IDENTITY")
    logger.info("Table wise_saying truncated.")


def make_db() -> SimpleDb:
    """Build a SimpleDb from the values in config.py."""
    from config import DB_DEV_MODE, DB_HOST, DB_NAME, DB_PASS, DB_PORT, DB_USER

    return SimpleDb(DB_HOST, DB_USER, DB_PASS, DB_NAME, port=DB_PORT, dev_mode=DB_DEV_MODE)


if __name__ == "__main__":
    simple_db = make_db()
    create_tables(simple_db)
    simple_db.close_all()
    print("✅ Database schema created successfully.")
