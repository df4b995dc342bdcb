import pytest

from src.domain.errors import PersistenceError
from src.infrastructure.storage.memory_store import InMemoryReportStore


def test_upload_records_media():
    store = InMemoryReportStore()
    assert store.upload_media("u", "r", "face", "media/face.jpg") == "u/r/face"
    assert store.media["u/r/face"] == "media/face.jpg"


def test_upload_without_uri():
    with pytest.raises(PersistenceError):
        InMemoryReportStore().upload_media("u", "r", "face", "")


def test_insert_and_query():
    store = InMemoryReportStore()
    store.insert_report({"id": "1", "user_id": "a"})
    store.insert_report({"id": "2", "user_id": "b"})
    assert [r["id"] for r in store.reports_for("a")] == ["1"]


def test_duplicate_id_rejected():
    store = InMemoryReportStore()
    store.insert_report({"id": "1", "user_id": "a"})
    with pytest.raises(PersistenceError):
        store.insert_report({"id": "1", "user_id": "a"})
