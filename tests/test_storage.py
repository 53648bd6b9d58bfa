"""Tests for the Session Store persistence backends."""

from anatomy.appconfig import STORE_NAMESPACE
from anatomy.session_store import SessionStore
from anatomy.storage import KeyValueStorage, MemoryStorage, StoreEntry


class TestMemoryStorage:
    def test_load_missing_returns_none(self):
        assert MemoryStorage().load("nothing") is None

    def test_values_are_copied(self):
        storage = MemoryStorage()
        value = {"user": {"name": "a"}}
        storage.save("k", value)
        value["user"]["name"] = "mutated"
        loaded = storage.load("k")
        loaded["user"]["name"] = "also mutated"
        assert storage.load("k") == {"user": {"name": "a"}}

    def test_clear(self):
        storage = MemoryStorage({"k": {"a": 1}})
        storage.clear("k")
        storage.clear("k")
        assert storage.load("k") is None


class TestKeyValueStorage:
    def test_save_and_load(self, temp_db):
        storage = KeyValueStorage()
        storage.save("k", {"user": None, "isAdmin": False})
        assert storage.load("k") == {"user": None, "isAdmin": False}

    def test_save_overwrites_single_row(self, temp_db):
        storage = KeyValueStorage()
        storage.save("k", {"v": 1})
        storage.save("k", {"v": 2})
        assert storage.load("k") == {"v": 2}
        assert StoreEntry.select().where(StoreEntry.key == "k").count() == 1

    def test_clear(self, temp_db):
        storage = KeyValueStorage()
        storage.save("k", {"v": 1})
        storage.clear("k")
        assert storage.load("k") is None

    def test_session_survives_new_store_instance(self, temp_db, clock):
        first = SessionStore(KeyValueStorage(), clock=clock)
        first.initialize()
        first.login("admin@admin.com", "admin")

        second = SessionStore(KeyValueStorage(), clock=clock)
        second.initialize()
        assert second.identity == first.identity
        assert second.is_admin is True
        assert StoreEntry.get(StoreEntry.key == STORE_NAMESPACE)
