"""Shared fixtures for the notemark test suite."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from notemark.api.deps import get_metadata_service
from notemark.config import Settings
from notemark.database import create_bookmark_store, create_note_store, init_db
from notemark.main import create_app
from notemark.services.metadata import Metadata


class FakeClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now += self.step
        return current


class FakeMetadataService:
    """Records requested URLs and returns canned metadata."""

    def __init__(self, metadata=None):
        self.metadata = metadata
        self.calls = []

    async def extract(self, url):
        self.calls.append(url)
        if self.metadata is None:
            return Metadata(title=url)
        return self.metadata


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def note_store(clock):
    return create_note_store(clock)


@pytest.fixture
def bookmark_store(clock):
    return create_bookmark_store(clock)


@pytest.fixture
def metadata_service():
    return FakeMetadataService()


@pytest.fixture
def app(metadata_service):
    app = create_app(Settings(app_name="Notemark Test"))
    app.dependency_overrides[get_metadata_service] = lambda: metadata_service
    return app


@pytest.fixture
def client(app, clock):
    with TestClient(app) as client:
        # Replace the startup stores with ones on a deterministic clock.
        app.state.db = init_db(clock)
        yield client
