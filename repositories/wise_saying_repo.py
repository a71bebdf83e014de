"""
repositories/wise_saying_repo.py
--------------------------------
Interface shared by every WiseSaying storage backend.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.wise_saying import WiseSaying

SEARCHABLE_FIELDS = ("content", "author")


def check_keyword_type(keyword_type: str) -> str:
    """Return ``keyword_type`` if it names a searchable field, else raise ValueError."""
    if keyword_type not in SEARCHABLE_FIELDS:
        raise ValueError(f"Unknown keyword type '{keyword_type}', expected one of {SEARCHABLE_FIELDS}")
    return keyword_type


class WiseSayingRepository(ABC):
    """Persistence contract for WiseSaying entities."""

    @abstractmethod
    def save(self, wise_saying: WiseSaying) -> WiseSaying:
        """Insert a new entity (assigning its id) or overwrite an existing one."""

    @abstractmethod
    def find_all(self) -> list[WiseSaying]:
        """All entities, newest first."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[WiseSaying]:
        ...

    @abstractmethod
    def delete_by_id(self, id: int) -> bool:
        """Returns True if an entity was deleted."""

    def search(self, keyword_type: str, keyword: str) -> list[WiseSaying]:
        """Entities whose ``keyword_type`` field contains ``keyword``, newest first."""
        check_keyword_type(keyword_type)
        return [w for w in self.find_all() if keyword in getattr(w, keyword_type)]

    def count(self) -> int:
        return len(self.find_all())
