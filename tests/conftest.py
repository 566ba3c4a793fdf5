# tests/conftest.py
from datetime import datetime, timedelta, UTC

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from flowbuilder.deps import get_storage, get_tracker
from flowbuilder.main import app
from flowbuilder.services.executions import ExecutionTracker
from flowbuilder.services.sql_storage import SqlStorage
from flowbuilder.services.storage import MemStorage

SAMPLE_NODES = [
    {
        "id": "webhook-1",
        "type": "webhook",
        "position": {"x": 200, "y": 150},
        "data": {
            "label": "Webhook Trigger",
            "description": "Listens for HTTP requests",
            "category": "trigger",
            "config": {"method": "POST", "path": "/webhook/abc123"},
        },
    },
    {
        "id": "email-1",
        "type": "email",
        "position": {"x": 500, "y": 150},
        "data": {"label": "Send Email", "category": "action", "config": {"to": "{{user.email}}"}},
    },
]
SAMPLE_EDGES = [{"id": "webhook-email", "source": "webhook-1", "target": "email-1"}]


class FakeClock:
    """Manually advanced clock for the execution tracker."""

    def __init__(self):
        self.now = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self):
        return self.now

    def advance(self, seconds: float):
        self.now += timedelta(seconds=seconds)


def _sql_storage():
    # "sqlite://" + StaticPool keeps a single in-memory connection alive
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    storage = SqlStorage(engine)
    storage.create_schema()
    return storage


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    """Every storage test runs against both backends."""
    if request.param == "sqlite":
        return _sql_storage()
    return MemStorage()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def tracker(clock):
    return ExecutionTracker(duration_seconds=3.0, clock=clock)


@pytest.fixture()
def client(tracker):
    """Test client over a fresh, unseeded in-memory store."""
    mem = MemStorage()
    app.dependency_overrides[get_storage] = lambda: mem
    app.dependency_overrides[get_tracker] = lambda: tracker
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def workflow_payload():
    return {
        "name": "Lead intake",
        "description": "Webhook to email",
        "nodes": SAMPLE_NODES,
        "edges": SAMPLE_EDGES,
        "isActive": True,
    }
