"""
main.py
-------
Entry point for the Wise Saying console app.

Responsibilities:
    - Pick the storage backend (file, memory or PostgreSQL) from config.
    - Initialize the database schema when PostgreSQL is used.
    - Run the console command loop and release connections on exit.
"""

from config import BUILD_PATH, FILE_DB_PATH, STORAGE_BACKEND
from db.init_db import create_tables, make_db
from handlers.app import App
from handlers.wise_saying_controller import WiseSayingController
from repositories.wise_saying_db_repo import WiseSayingDbRepository
from repositories.wise_saying_file_repo import WiseSayingFileRepository
from repositories.wise_saying_mem_repo import WiseSayingMemRepository
from services.wise_saying_service import WiseSayingService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize storage and run the app."""

    # ── 1. Storage setup ──────────────────────────────────
    db = None
    if STORAGE_BACKEND == "db":
        logger.info("Initializing database...")
        db = make_db()
        create_tables(db)
        repo = WiseSayingDbRepository(db)
    elif STORAGE_BACKEND == "mem":
        repo = WiseSayingMemRepository()
    else:
        repo = WiseSayingFileRepository(FILE_DB_PATH)

    # ── 2. Run the command loop ───────────────────────────
    service = WiseSayingService(repo)
    try:
        App(WiseSayingController(service, BUILD_PATH)).run()
    finally:
        # ── 3. Cleanup on shutdown ────────────────────────
        if db is not None:
            db.close_all()


if __name__ == "__main__":
    main()
