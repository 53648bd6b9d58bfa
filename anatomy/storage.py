"""Durable key-value backends for the Session Store snapshot.

A backend only has to load, save and clear one JSON-serialisable dict per
namespace key.  The Session Store never looks past this interface, so any
key-value store can sit behind it.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from peewee import CharField, Model, TextField

from .db import db, get_db

log = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Get/set of a serialisable snapshot under a namespace key."""

    @abstractmethod
    def load(self, key: str) -> dict[str, Any] | None:
        """Return the stored snapshot, or ``None`` when nothing is stored."""

    @abstractmethod
    def save(self, key: str, value: dict[str, Any]) -> None:
        """Replace the stored snapshot."""

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove the stored snapshot (no-op when absent)."""


class MemoryStorage(StorageBackend):
    """In-process backend; holds deep copies so callers cannot alias state."""

    def __init__(self, initial: dict[str, dict[str, Any]] | None = None):
        self._data: dict[str, dict[str, Any]] = copy.deepcopy(initial or {})
        self.writes = 0

    def load(self, key: str) -> dict[str, Any] | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def save(self, key: str, value: dict[str, Any]) -> None:
        self._data[key] = copy.deepcopy(value)
        self.writes += 1

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class StoreEntry(Model):
    """One JSON-encoded snapshot per namespace key."""

    key = CharField(max_length=128, unique=True)
    value = TextField()  # JSON-encoded value

    class Meta:
        database = db
        table_name = "kvstore"


class KeyValueStorage(StorageBackend):
    """Backend persisted in the ``kvstore`` table, so it survives restarts."""

    def _connect(self) -> None:
        get_db().connect(reuse_if_open=True)

    def load(self, key: str) -> dict[str, Any] | None:
        self._connect()
        row = StoreEntry.get_or_none(StoreEntry.key == key)
        if row is None:
            return None
        return json.loads(row.value)

    def save(self, key: str, value: dict[str, Any]) -> None:
        self._connect()
        encoded = json.dumps(value)
        (
            StoreEntry.insert(key=key, value=encoded)
            .on_conflict(
                conflict_target=[StoreEntry.key],
                update={StoreEntry.value: encoded},
            )
            .execute()
        )
        log.debug("Saved snapshot %s (%d bytes)", key, len(encoded))

    def clear(self, key: str) -> None:
        self._connect()
        StoreEntry.delete().where(StoreEntry.key == key).execute()
