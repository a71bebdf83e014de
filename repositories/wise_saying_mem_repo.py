"""
repositories/wise_saying_mem_repo.py
------------------------------------
In-process WiseSaying storage. Contents are lost when the process exits.
"""

from typing import Optional

from models.wise_saying import WiseSaying
from repositories.wise_saying_repo import WiseSayingRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class WiseSayingMemRepository(WiseSayingRepository):

    def __init__(self):
        self._items: list[WiseSaying] = []
        self._last_id = 0
        logger.info("Using in-memory storage.")

    def save(self, wise_saying: WiseSaying) -> WiseSaying:
        if not wise_saying.is_new():
            self._items = [wise_saying if w.id == wise_saying.id else w for w in self._items]
            return wise_saying

        self._last_id += 1
        wise_saying.id = self._last_id
        self._items.append(wise_saying)
        return wise_saying

    def find_all(self) -> list[WiseSaying]:
        return list(reversed(self._items))

    def find_by_id(self, id: int) -> Optional[WiseSaying]:
        return next((w for w in self._items if w.id == id), None)

    def delete_by_id(self, id: int) -> bool:
        before = len(self._items)
        self._items = [w for w in self._items if w.id != id]
        return len(self._items) < before
