"""
utils/json_file.py
------------------
Small helpers for reading and writing JSON and plain-text files.
"""

import json
from pathlib import Path
from typing import Any, Optional


def write_json(path: str | Path, data: Any) -> None:
    """Write ``data`` as pretty-printed UTF-8 JSON, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def read_json(path: str | Path) -> Optional[Any]:
    """Return the parsed JSON content of ``path``, or None if the file does not exist."""
    source = Path(path)
    if not source.exists():
        return None
    return json.loads(source.read_text(encoding="utf-8"))


def write_text(path: str | Path, text: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")


def read_text(path: str | Path, default: str = "") -> str:
    source = Path(path)
    if not source.exists():
        return default
    return source.read_text(encoding="utf-8")


def delete(path: str | Path) -> bool:
    """Delete a file. Returns False if it did not exist."""
    target = Path(path)
    if not target.exists():
        return False
    target.unlink()
    return True
