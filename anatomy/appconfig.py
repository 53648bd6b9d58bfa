"""Environment-driven configuration for the anatomy explorer.

Nothing here touches the database; every value is read from the process
environment on each call so tests can ``monkeypatch.setenv`` freely.
"""

import os

import pytz

# Namespace key under which the Session Store snapshot is persisted.
STORE_NAMESPACE = "anatomy-explorer-auth"

# Fixed demo address that always logs in as a premium subscriber.
DEMO_PREMIUM_EMAIL = "user@user.com"

LOGIN_PATH = "/login"
HOME_PATH = "/"

_TRUTHY = ("1", "true", "yes")


def get_db_path_from_env() -> str:
    """Return the SQLite database path.

    Checks the ``ANATOMY_DB`` environment variable first, then falls back
    to ``anatomy.sqlite3`` in the current directory.
    """
    return os.environ.get("ANATOMY_DB", "anatomy.sqlite3")


def is_maintenance_mode() -> bool:
    """Return True when MAINTENANCE_MODE env var is set to a truthy value."""
    return os.environ.get("MAINTENANCE_MODE", "").lower() in _TRUTHY


def get_login_delay() -> float:
    """Seconds the demo login pauses to stand in for a network round-trip."""
    try:
        return max(0.0, float(os.environ.get("LOGIN_DELAY_SECONDS", "0")))
    except ValueError:
        return 0.0


def get_home_timezone():
    """Timezone used when rendering dates; unknown names fall back to UTC."""
    try:
        return pytz.timezone(os.environ.get("HOME_TIMEZONE", "UTC"))
    except pytz.UnknownTimeZoneError:
        return pytz.UTC
