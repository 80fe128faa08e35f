"""Tests for the JSON file item store."""

import json
import os

import pytest

from catalog.clients.item_store import JsonItemStore
from catalog.core.errors import SourceUnavailable


class TestReads:
    @pytest.mark.asyncio
    async def test_read_all_items(self, data_file):
        store = JsonItemStore(data_file)
        items = await store.read_all_items()
        assert len(items) == 5
        assert items[0]["name"] == "Laptop Pro"

    @pytest.mark.asyncio
    async def test_get_item(self, data_file):
        store = JsonItemStore(data_file)
        assert (await store.get_item(3))["name"] == "Standing Desk"
        assert await store.get_item(999) is None

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        store = JsonItemStore(tmp_path / "nope.json")
        with pytest.raises(SourceUnavailable, match="not found"):
            await store.read_all_items()
        with pytest.raises(SourceUnavailable):
            await store.read_current_version()

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text("{not json")
        with pytest.raises(SourceUnavailable):
            await JsonItemStore(path).read_all_items()

    @pytest.mark.asyncio
    async def test_not_an_array(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps({"items": []}))
        with pytest.raises(SourceUnavailable, match="array"):
            await JsonItemStore(path).read_all_items()

    @pytest.mark.asyncio
    async def test_version_is_stable_without_writes(self, data_file):
        store = JsonItemStore(data_file)
        assert await store.read_current_version() == await store.read_current_version()


class TestWrites:
    @pytest.mark.asyncio
    async def test_add_item_assigns_next_id(self, data_file):
        store = JsonItemStore(data_file)
        item = await store.add_item("  Bookshelf ", " Furniture ", 150)
        assert item == {"id": 6, "name": "Bookshelf", "category": "Furniture", "price": 150.0}
        on_disk = json.loads(data_file.read_text())
        assert on_disk[-1] == item
        assert len(on_disk) == 6

    @pytest.mark.asyncio
    async def test_add_item_to_empty_store(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text("[]")
        item = await JsonItemStore(path).add_item("Pen", "Office", 2)
        assert item["id"] == 1

    @pytest.mark.asyncio
    async def test_add_item_leaves_no_temp_file(self, data_file):
        await JsonItemStore(data_file).add_item("Pen", "Office", 2)
        assert os.listdir(data_file.parent) == [data_file.name]

    @pytest.mark.asyncio
    async def test_failed_replace_cleans_up_temp_file(self, data_file, monkeypatch):
        original = data_file.read_text()

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)
        with pytest.raises(SourceUnavailable, match="Failed to write"):
            await JsonItemStore(data_file).add_item("Pen", "Office", 2)
        assert os.listdir(data_file.parent) == [data_file.name]
        assert data_file.read_text() == original

    @pytest.mark.asyncio
    async def test_add_item_changes_version(self, data_file):
        store = JsonItemStore(data_file)
        before = await store.read_current_version()
        await store.add_item("Pen", "Office", 2)
        assert await store.read_current_version() != before
