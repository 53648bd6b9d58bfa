"""Database initialisation for the anatomy explorer web app."""

import logging

log = logging.getLogger(__name__)

_db_initialized = False


def _init_db() -> bool:
    """Configure the DB and ensure all tables exist.

    Resolution order (no config file needed):
      1. DATABASE_URL env var  → PostgreSQL
      2. ANATOMY_DB env var    → SQLite at that path
      3. Default               → anatomy.sqlite3 in cwd
    """
    global _db_initialized
    if not _db_initialized:
        try:
            from anatomy.appconfig import get_db_path_from_env
            from anatomy.database import get_all_models, migrate_tables
            from anatomy.db import configure_db

            configure_db(get_db_path_from_env())
            migrate_tables(get_all_models())

            _db_initialized = True
        except Exception as e:
            log.error("DB init failed: %s", e)
            return False
    return True
