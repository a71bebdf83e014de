"""
models/wise_saying.py
---------------------
Domain model for a wise saying (a quote and its author).
"""

from dataclasses import dataclass


@dataclass
class WiseSaying:
    """
    Represents a single wise saying.

    Attributes:
        content: The quote itself.
        author: Who said it.
        id: Primary key; 0 until the entity is first saved.
    """
    content: str
    author: str
    id: int = 0

    def is_new(self) -> bool:
        """Returns True if the entity has never been saved."""
        return self.id == 0

    def to_map(self) -> dict:
        """Key -> value mapping used by the JSON file store."""
        return {"id": self.id, "content": self.content, "author": self.author}

    @classmethod
    def from_map(cls, data: dict) -> "WiseSaying":
        return cls(
            id=int(data.get("id", 0)),
            content=str(data["content"]),
            author=str(data["author"]),
        )

    def __str__(self) -> str:
        return f"{self.id} / {self.author} / {self.content}"
