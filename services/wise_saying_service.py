"""
services/wise_saying_service.py
-------------------------------
Business logic for wise sayings.
Works with any WiseSayingRepository backend.
"""

from pathlib import Path
from typing import Optional

from models.wise_saying import WiseSaying
from repositories.wise_saying_repo import WiseSayingRepository
from utils import json_file
from utils.logger import get_logger

logger = get_logger(__name__)


class WiseSayingService:
    """Handles all business logic related to wise sayings."""

    def __init__(self, repo: WiseSayingRepository):
        self.repo = repo

    def write(self, content: str, author: str) -> WiseSaying:
        """Create and persist a new wise saying."""
        return self.repo.save(WiseSaying(content=content, author=author))

    def get_all(self) -> list[WiseSaying]:
        return self.repo.find_all()

    def get_by_id(self, id: int) -> Optional[WiseSaying]:
        return self.repo.find_by_id(id)

    def search(self, keyword_type: str, keyword: str) -> list[WiseSaying]:
        return self.repo.search(keyword_type, keyword)

    def count(self) -> int:
        return self.repo.count()

    def modify(self, wise_saying: WiseSaying, content: str, author: str) -> WiseSaying:
        wise_saying.content = content
        wise_saying.author = author
        return self.repo.save(wise_saying)

    def delete(self, id: int) -> bool:
        return self.repo.delete_by_id(id)

    def build(self, path: str | Path) -> int:
        """
        Dump every wise saying into a single JSON array, oldest first.

        Returns:
            Number of entries written.
        """
        items = sorted(self.repo.find_all(), key=lambda w: w.id)
        json_file.write_json(path, [w.to_map() for w in items])
        logger.info(f"Built {path} with {len(items)} wise saying(s)")
        return len(items)
