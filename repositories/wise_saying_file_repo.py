"""
repositories/wise_saying_file_repo.py
-------------------------------------
Stores each WiseSaying as ``<id>.json`` in a directory.
The last assigned id is kept in ``lastId.txt`` next to them.
"""

from pathlib import Path
from typing import Optional

from models.wise_saying import WiseSaying
from repositories.wise_saying_repo import WiseSayingRepository
from utils import json_file
from utils.logger import get_logger

logger = get_logger(__name__)

LAST_ID_FILE = "lastId.txt"


class WiseSayingFileRepository(WiseSayingRepository):
    """
    JSON-file backed repository.

    Args:
        db_path: Directory holding the entity files.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        logger.info(f"Using file storage at {self.db_path}.")

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, wise_saying: WiseSaying) -> WiseSaying:
        """
        Persist an entity. New entities get ``last id + 1``.

        Returns:
            The same entity, with its id populated.
        """
        if wise_saying.is_new():
            wise_saying.id = self.get_last_id() + 1
            json_file.write_text(self.db_path / LAST_ID_FILE, str(wise_saying.id))

        json_file.write_json(self._file_path(wise_saying.id), wise_saying.to_map())
        logger.info(f"Saved wise saying #{wise_saying.id}")
        return wise_saying

    # ── READ ──────────────────────────────────────────────

    def find_all(self) -> list[WiseSaying]:
        if not self.db_path.exists():
            return []
        items = [
            WiseSaying.from_map(json_file.read_json(path))
            for path in self.db_path.glob("*.json")
            if path.stem.isdigit()
        ]
        return sorted(items, key=lambda w: w.id, reverse=True)

    def find_by_id(self, id: int) -> Optional[WiseSaying]:
        data = json_file.read_json(self._file_path(id))
        return WiseSaying.from_map(data) if data is not None else None

    def get_last_id(self) -> int:
        return int(json_file.read_text(self.db_path / LAST_ID_FILE, "0").strip() or 0)

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, id: int) -> bool:
        deleted = json_file.delete(self._file_path(id))
        if deleted:
            logger.info(f"Deleted wise saying #{id}")
        return deleted

    def _file_path(self, id: int) -> Path:
        return self.db_path / f"{id}.json"
