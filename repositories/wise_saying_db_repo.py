"""
repositories/wise_saying_db_repo.py
-----------------------------------
Data access layer for wise sayings stored in PostgreSQL.
All SQL queries related to the `wise_saying` table live here.
"""

from typing import Optional

from db.simple_db import SimpleDb
from models.wise_saying import WiseSaying
from repositories.wise_saying_repo import WiseSayingRepository, check_keyword_type
from utils.logger import get_logger

logger = get_logger(__name__)


class WiseSayingDbRepository(WiseSayingRepository):
    """Repository for CRUD operations on the wise_saying table."""

    def __init__(self, db: SimpleDb):
        self.db = db

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, wise_saying: WiseSaying) -> WiseSaying:
        """
        Insert a new row or update the existing one.

        Returns:
            The same WiseSaying with its `id` populated.
        """
        try:
            if wise_saying.is_new():
                wise_saying.id = self.db.insert(
                    "INSERT INTO wise_saying (content, author) VALUES (?, ?)",
                    [wise_saying.content, wise_saying.author],
                )
                logger.info(f"Added wise saying #{wise_saying.id}")
            else:
                self.db.update(
                    "UPDATE wise_saying SET content = ?, author = ? WHERE id = ?",
                    [wise_saying.content, wise_saying.author, wise_saying.id],
                )
            return wise_saying
        except Exception as e:
            logger.error(f"Failed to save wise saying #{wise_saying.id}: {e}")
            raise

    # ── READ ──────────────────────────────────────────────

    def find_all(self) -> list[WiseSaying]:
        return self.db.select_rows(
            "SELECT id, content, author FROM wise_saying ORDER BY id DESC", [], WiseSaying
        )

    def find_by_id(self, id: int) -> Optional[WiseSaying]:
        return self.db.select_row(
            "SELECT id, content, author FROM wise_saying WHERE id = ?", [id], WiseSaying
        )

    def search(self, keyword_type: str, keyword: str) -> list[WiseSaying]:
        """Substring search on `content` or `author`, newest first."""
        column = check_keyword_type(keyword_type)
        sql = (
            self.db.gen_sql()
            .append("SELECT id, content, author FROM wise_saying")
            .append(f"WHERE {column} LIKE ?", f"%{keyword}%")
            .append("ORDER BY id DESC")
        )
        return sql.select_rows(WiseSaying)

    def count(self) -> int:
        return self.db.select_long("SELECT COUNT(*) FROM wise_saying")

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, id: int) -> bool:
        try:
            deleted = self.db.delete("DELETE FROM wise_saying WHERE id = ?", [id]) > 0
            if deleted:
                logger.info(f"Deleted wise saying #{id}")
            return deleted
        except Exception as e:
            logger.error(f"Failed to delete wise saying #{id}: {e}")
            raise
