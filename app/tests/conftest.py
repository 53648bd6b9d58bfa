import contextlib
import os
import sys
import tempfile

import pytest

# Prevent Sentry SDK from initialising during tests.
os.environ.pop("SENTRY_DSN", None)
os.environ.pop("SENTRY_ENV", None)

# Default to normal operation; individual tests enable it explicitly.
os.environ.pop("MAINTENANCE_MODE", None)
os.environ.pop("LOGIN_DELAY_SECONDS", None)

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))


def _reset_db_state():
    import anatomy.db as adb
    import db_init as db_init_module

    db_init_module._db_initialized = False
    adb._configured = False


@pytest.fixture(autouse=True)
def reset_db_state():
    """Reset DB initialisation state between tests to prevent leakage."""
    _reset_db_state()
    yield
    _reset_db_state()


@pytest.fixture
def app_database(monkeypatch):
    """Temporary SQLite database picked up by the app's lazy DB init."""
    from anatomy.db import get_db

    monkeypatch.delenv("DATABASE_URL", raising=False)

    with tempfile.NamedTemporaryFile(suffix=".sqlite3", delete=False) as f:
        db_path = f.name
    monkeypatch.setenv("ANATOMY_DB", db_path)

    yield db_path

    with contextlib.suppress(Exception):
        get_db().close()
    if os.path.exists(db_path):
        os.remove(db_path)


@pytest.fixture
def client(app_database):
    """Flask test client backed by a fresh database."""
    from main import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


@pytest.fixture
def account(client):
    """An active server-side account: reader@example.com / secret."""
    from anatomy.accounts import User
    from anatomy.db import get_db

    # The first request configures the database.
    client.get("/login")
    get_db().connect(reuse_if_open=True)
    user = User(email="reader@example.com", name="Reader")
    user.set_password("secret")
    user.save()
    return user
