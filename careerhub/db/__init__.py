"""
Database module - key-value persistence (JSON files or MongoDB) and demo data.
"""
from careerhub.db.kv_store import KeyValueStore, create_kv_store

__all__ = [
    "KeyValueStore",
    "create_kv_store",
]
