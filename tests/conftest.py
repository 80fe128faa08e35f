"""Shared test fixtures."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.core.errors import SourceUnavailable
from catalog.main import create_app


SAMPLE_ITEMS = [
    {"id": 1, "name": "Laptop Pro", "category": "Electronics", "price": 2500},
    {"id": 2, "name": "Headphones", "category": "Electronics", "price": 400},
    {"id": 3, "name": "Standing Desk", "category": "Furniture", "price": 1200},
    {"id": 4, "name": "Desk Lamp", "category": "Furniture", "price": 60},
    {"id": 5, "name": "Coffee Beans", "category": "Groceries", "price": 15},
]


class FakeSource:
    """In-memory item source that counts reads and can be made to fail."""

    def __init__(self, items=None):
        self.items = list(items or [])
        self.version = 0
        self.version_reads = 0
        self.item_reads = 0
        self.fail_version = False
        self.fail_items = False

    def mutate(self, items):
        self.items = list(items)
        self.version += 1

    async def read_current_version(self):
        self.version_reads += 1
        if self.fail_version:
            raise SourceUnavailable("stat failed")
        return self.version

    async def read_all_items(self):
        self.item_reads += 1
        if self.fail_items:
            raise SourceUnavailable("Data file not found")
        return list(self.items)


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeWallClock:
    """UTC clock that ticks one second on every call."""

    def __init__(self):
        self.now = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def source():
    return FakeSource(SAMPLE_ITEMS)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def wall_clock():
    return FakeWallClock()


@pytest.fixture
def data_file(tmp_path):
    """Write the sample items to a temporary JSON file."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps(SAMPLE_ITEMS))
    return path


@pytest.fixture
def settings(data_file):
    return Settings(data_path=data_file, default_page_limit=2, max_page_limit=3)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
