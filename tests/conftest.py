import pytest
from fastapi.testclient import TestClient

from workhours.core.config import ServerConfig
from workhours.models.shift import ShiftEntry
from workhours.services.shift_service import build_record


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "workhours_test.db"
    monkeypatch.setattr(ServerConfig, "DATABASE_PATH", str(path))
    monkeypatch.setattr(ServerConfig, "SEED_TEST_DATA", False)
    return path


@pytest.fixture
def client(db_path):
    from workhours.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_record():
    """Build a stored-shape record the way the entry form would"""
    counter = {"next_id": 1}

    def _make(date, start="08:00", end="16:00", break_minutes=0, project_id="proj-1", **extra):
        entry = ShiftEntry(
            date=date,
            start_time=start,
            end_time=end,
            break_minutes=break_minutes,
            project_id=project_id,
            **extra,
        )
        record = build_record(entry, "acct-1", record_id=counter["next_id"])
        counter["next_id"] += 1
        return record

    return _make
