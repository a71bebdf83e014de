"""
handlers/command.py
-------------------
Parses console commands of the form ``action?key=value&key2=value2``.
"""

from typing import Optional


class Command:
    """A parsed console command."""

    def __init__(self, raw: str):
        self.raw = raw.strip()
        action, _, query = self.raw.partition("?")
        self.action = action.strip()
        self.params: dict[str, str] = {}
        for pair in query.split("&"):
            key, sep, value = pair.partition("=")
            if sep and key.strip():
                self.params[key.strip()] = value.strip()

    def get_param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.params.get(name, default)

    def get_param_as_int(self, name: str, default: int = 0) -> int:
        """Return the parameter as int, or ``default`` if it is missing or not a number."""
        try:
            return int(self.params[name])
        except (KeyError, ValueError):
            return default
