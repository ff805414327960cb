"""
Key-Value Store - durable slots for client-side state.

Slots in this store:
1. user              - serialized current actor (role-tagged)
2. savedJobs         - JSON array of job ids
3. savedEvents       - JSON array of event ids
4. savedCompanies    - JSON array of company ids
5. registeredEvents  - JSON array of full Event objects

Every write goes straight to the backend (no batching) so a restart sees
exactly what was last written. Concurrent sessions are last-write-wins.
"""

import json
import logging
import os
import re
from typing import Any, Dict, Optional

from pymongo.collection import Collection

from careerhub.core.config import Settings, get_settings
from careerhub.core.errors import StorageError

logger = logging.getLogger(__name__)


# Slot names (avoid typos)
USER_KEY = "user"
REGISTERED_EVENTS_KEY = "registeredEvents"
SAVED_KEYS = {
    "jobs": "savedJobs",
    "events": "savedEvents",
    "companies": "savedCompanies",
}


class KeyValueStore:
    """Interface shared by the storage backends."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    """Process-local store. Values are JSON round-tripped like the real backends."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    One JSON file per slot inside a directory.

    Example layout:
        .careerhub/user.json
        .careerhub/savedJobs.json
    """

    def __init__(self, directory: str):
        self.directory = directory
        os.makedirs(directory, exist_ok=True)

    def _path(self, key: str) -> str:
        safe = re.sub(r"[^A-Za-z0-9_.-]", "_", key)
        return os.path.join(self.directory, f"{safe}.json")

    def get(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        if not os.path.exists(path):
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Could not read slot %s: %s", key, e)
            return default

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_path = f"{path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(value, f)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error("Could not write slot %s: %s", key, e)
            raise StorageError(f"Failed to persist {key}", key=key) from e

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError(f"Failed to delete {key}", key=key) from e


class MongoKeyValueStore(KeyValueStore):
    """
    Slots stored as {"key": ..., "value": ...} documents.
    Useful when several portal processes should share one store.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def get(self, key: str, default: Any = None) -> Any:
        doc = self.collection.find_one({"key": key})
        if doc is None:
            return default
        return doc.get("value", default)

    def set(self, key: str, value: Any) -> None:
        # Upsert: update if exists, insert if not
        try:
            self.collection.update_one({"key": key}, {"$set": {"key": key, "value": value}}, upsert=True)
        except Exception as e:
            logger.error("Could not write slot %s to MongoDB: %s", key, e)
            raise StorageError(f"Failed to persist {key}", key=key) from e

    def delete(self, key: str) -> None:
        self.collection.delete_one({"key": key})


def create_kv_store(settings: Optional[Settings] = None) -> KeyValueStore:
    """Pick the backend named by settings.storage_backend."""
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()

    if backend == "file":
        return JsonFileStore(settings.storage_dir)
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "mongo":
        from careerhub.db.mongodb import COLLECTIONS, get_collection, init_mongo_indexes
        init_mongo_indexes()
        return MongoKeyValueStore(get_collection(COLLECTIONS["kv_store"]))

    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
