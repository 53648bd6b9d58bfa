"""Database migration/bootstrap command.

Ensures all tables exist for the configured backend (SQLite or PostgreSQL).
Idempotent: safe to run on every container start.  On Postgres the
connection is retried for up to ~60 s in case the database container is
still starting.
"""

import os
import time

from anatomy.core import Anatomy

_MAX_RETRIES = 12
_RETRY_DELAY = 5  # seconds


def run() -> None:
    attempts = _MAX_RETRIES if os.environ.get("DATABASE_URL") else 1
    for attempt in range(1, attempts + 1):
        try:
            with Anatomy():
                pass
        except Exception as e:
            if attempt == attempts:
                print(f"❌ Migration failed: {e}")
                raise
            print(f"⏳ Database not ready ({e}); retrying in {_RETRY_DELAY}s ({attempt}/{attempts})")
            time.sleep(_RETRY_DELAY)
        else:
            print("✅ Database schema is up to date")
            return
