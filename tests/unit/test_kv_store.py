"""Tests for the key-value storage backends."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from careerhub.core.config import Settings
from careerhub.core.errors import StorageError
from careerhub.db.kv_store import (
    JsonFileStore, MemoryKeyValueStore, MongoKeyValueStore, create_kv_store
)

# ---------------------------------------------------------------------------
# TestJsonFileStore
# ---------------------------------------------------------------------------


class TestJsonFileStore:

    def test_round_trip(self, tmp_path: Path) -> None:
        store = JsonFileStore(str(tmp_path))
        store.set("savedJobs", ["job-1", "job-2"])
        assert store.get("savedJobs") == ["job-1", "job-2"]
        assert (tmp_path / "savedJobs.json").exists()

    def test_visible_to_new_instance(self, tmp_path: Path) -> None:
        JsonFileStore(str(tmp_path)).set("user", {"id": "u1"})
        assert JsonFileStore(str(tmp_path)).get("user") == {"id": "u1"}

    def test_missing_key_returns_default(self, tmp_path: Path) -> None:
        store = JsonFileStore(str(tmp_path))
        assert store.get("nothing") is None
        assert store.get("nothing", []) == []

    def test_corrupt_file_returns_default(self, tmp_path: Path) -> None:
        (tmp_path / "user.json").write_text("not-json{{{")
        assert JsonFileStore(str(tmp_path)).get("user", "fallback") == "fallback"

    def test_key_is_sanitized(self, tmp_path: Path) -> None:
        store = JsonFileStore(str(tmp_path))
        store.set("savedJobs:../../etc", [1])
        assert store.get("savedJobs:../../etc") == [1]
        assert all(p.parent == tmp_path for p in tmp_path.iterdir())

    def test_delete(self, tmp_path: Path) -> None:
        store = JsonFileStore(str(tmp_path))
        store.set("user", {"id": "u1"})
        store.delete("user")
        store.delete("user")
        assert store.get("user") is None

    def test_failed_write_raises(self, tmp_path: Path) -> None:
        store = JsonFileStore(str(tmp_path))
        (tmp_path / "user.json.tmp").mkdir()
        with pytest.raises(StorageError) as excinfo:
            store.set("user", {"id": "u1"})
        assert excinfo.value.key == "user"

    def test_creates_directory(self, tmp_path: Path) -> None:
        JsonFileStore(str(tmp_path / "nested" / "dir")).set("k", 1)
        assert json.loads((tmp_path / "nested" / "dir" / "k.json").read_text()) == 1


# ---------------------------------------------------------------------------
# TestMemoryAndMongo
# ---------------------------------------------------------------------------


class TestMemoryKeyValueStore:

    def test_values_are_copies(self) -> None:
        store = MemoryKeyValueStore()
        value = ["a"]
        store.set("k", value)
        value.append("b")
        assert store.get("k") == ["a"]


class TestMongoKeyValueStore:

    def test_set_upserts(self) -> None:
        collection = MagicMock()
        MongoKeyValueStore(collection).set("savedJobs", ["job-1"])
        collection.update_one.assert_called_once_with(
            {"key": "savedJobs"}, {"$set": {"key": "savedJobs", "value": ["job-1"]}}, upsert=True
        )

    def test_get(self) -> None:
        collection = MagicMock()
        collection.find_one.return_value = {"key": "user", "value": {"id": "u1"}}
        assert MongoKeyValueStore(collection).get("user") == {"id": "u1"}

    def test_get_missing(self) -> None:
        collection = MagicMock()
        collection.find_one.return_value = None
        assert MongoKeyValueStore(collection).get("user", "none") == "none"

    def test_write_failure(self) -> None:
        collection = MagicMock()
        collection.update_one.side_effect = RuntimeError("connection refused")
        with pytest.raises(StorageError):
            MongoKeyValueStore(collection).set("user", {})


class TestCreateKvStore:

    def test_backends(self, tmp_path: Path) -> None:
        file_settings = Settings(_env_file=None, storage_backend="file", storage_dir=str(tmp_path))
        assert isinstance(create_kv_store(file_settings), JsonFileStore)
        memory_settings = Settings(_env_file=None, storage_backend="memory")
        assert isinstance(create_kv_store(memory_settings), MemoryKeyValueStore)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError):
            create_kv_store(Settings(_env_file=None, storage_backend="redis"))
