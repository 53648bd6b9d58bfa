import contextlib
import os
import tempfile
from datetime import UTC, datetime

import pytest

from anatomy.database import get_all_models, migrate_tables
from anatomy.db import configure_db, get_db


class FrozenClock:
    """Callable clock for stores and derivers; advance it with ``tick``."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def tick(self, delta) -> None:
        self.now = self.now + delta


@pytest.fixture
def clock():
    return FrozenClock(datetime(2026, 1, 15, 12, 0, tzinfo=UTC))


@pytest.fixture
def temp_db(monkeypatch):
    """Temporary SQLite database with every table created."""
    import anatomy.db as adb

    monkeypatch.delenv("DATABASE_URL", raising=False)

    with tempfile.NamedTemporaryFile(suffix=".sqlite3", delete=False) as f:
        db_path = f.name

    adb._configured = False
    configure_db(db_path)
    monkeypatch.setenv("ANATOMY_DB", db_path)
    db = get_db()
    db.connect(reuse_if_open=True)
    migrate_tables(get_all_models())

    yield db_path

    with contextlib.suppress(Exception):
        db.close()
    adb._configured = False
    if os.path.exists(db_path):
        os.remove(db_path)
