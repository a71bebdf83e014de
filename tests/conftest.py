import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fakes import FakeConnection  # noqa: E402


@pytest.fixture()
def conn():
    return FakeConnection()


@pytest.fixture()
def db(conn):
    from db.simple_db import SimpleDb
    return SimpleDb("localhost", "user", "secret", "wise_saying", connect=lambda **kwargs: conn)
