"""Core wiring shared by the CLI commands."""

from .appconfig import get_db_path_from_env, get_login_delay
from .database import get_all_models, migrate_tables
from .db import configure_db, get_db
from .session_store import SessionStore
from .storage import KeyValueStorage


class Anatomy:
    """Configures the database and hands out a persisted Session Store."""

    def __init__(self, db_path: str | None = None):
        configure_db(db_path or get_db_path_from_env())

        db = get_db()
        db.connect(reuse_if_open=True)

        # Always migrate tables on startup
        migrate_tables(get_all_models())

        self.navigated_to: str | None = None

    def _record_navigation(self, path: str) -> None:
        self.navigated_to = path

    def session_store(self) -> SessionStore:
        """Return an initialised store persisted in the ``kvstore`` table."""
        store = SessionStore(
            KeyValueStorage(),
            navigate=self._record_navigation,
            login_delay=get_login_delay(),
        )
        store.initialize()
        return store

    def cleanup(self):
        """Clean up resources, close connections etc."""
        try:
            db = get_db()
            if db.is_connection_usable():
                db.close()
        except RuntimeError:
            # Database not configured, nothing to clean up
            pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.cleanup()
