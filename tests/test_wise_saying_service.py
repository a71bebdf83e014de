import json

from repositories.wise_saying_mem_repo import WiseSayingMemRepository
from services.wise_saying_service import WiseSayingService


def make_service():
    return WiseSayingService(WiseSayingMemRepository())


def test_write_and_get():
    service = make_service()

    saved = service.write("Know thyself", "Socrates")

    assert service.get_by_id(saved.id) is saved
    assert service.count() == 1


def test_modify():
    service = make_service()
    saved = service.write("old", "someone")

    service.modify(saved, "new", "Socrates")

    assert service.get_by_id(saved.id).content == "new"
    assert service.get_by_id(saved.id).author == "Socrates"


def test_delete():
    service = make_service()
    saved = service.write("a", "x")

    assert service.delete(saved.id) is True
    assert service.get_all() == []


def test_build_writes_oldest_first(tmp_path):
    service = make_service()
    service.write("a", "x")
    service.write("b", "y")
    target = tmp_path / "data.json"

    assert service.build(target) == 2
    assert json.loads(target.read_text(encoding="utf-8")) == [
        {"id": 1, "content": "a", "author": "x"},
        {"id": 2, "content": "b", "author": "y"},
    ]
