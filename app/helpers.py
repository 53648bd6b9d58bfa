"""Shared helper functions for the anatomy explorer web app."""

import re
from datetime import datetime
from typing import Any

from flask import g, session

from anatomy.appconfig import get_home_timezone, get_login_delay
from anatomy.identity import parse_timestamp
from anatomy.session_store import SessionStore
from anatomy.storage import StorageBackend

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class FlaskSessionStorage(StorageBackend):
    """Keeps the Session Store snapshot in the signed session cookie.

    The cookie lives in the browser and survives server restarts, which makes
    it the server-rendered stand-in for browser local storage.
    """

    def load(self, key: str) -> dict[str, Any] | None:
        return session.get(key)

    def save(self, key: str, value: dict[str, Any]) -> None:
        # Non-permanent cookies are dropped when the browser closes.
        session.permanent = True
        session[key] = value

    def clear(self, key: str) -> None:
        session.pop(key, None)


def _record_navigation(path: str) -> None:
    g.navigate_to = path


def get_store() -> SessionStore:
    """Return this request's Session Store, initialising it on first use."""
    store = g.get("session_store")
    if store is None:
        store = SessionStore(
            FlaskSessionStorage(),
            navigate=_record_navigation,
            login_delay=get_login_delay(),
        )
        store.initialize()
        g.session_store = store
    return store


def navigation_target(default: str) -> str:
    """Path the Session Store asked us to navigate to, or *default*."""
    return g.get("navigate_to") or default


def display_date(value: str | datetime | None) -> str:
    """Format an ISO timestamp for display in the configured timezone."""
    if not value:
        return "—"
    try:
        dt = parse_timestamp(value) if isinstance(value, str) else value
        return dt.astimezone(get_home_timezone()).strftime("%d %b %Y")
    except (ValueError, TypeError):
        return str(value)


def validate_profile(name: str, email: str, bio: str) -> dict[str, str]:
    """Return ``{field: message}`` for every invalid profile field."""
    errors = {}
    if len(name) < 2:
        errors["name"] = "Name must be at least 2 characters."
    elif len(name) > 30:
        errors["name"] = "Name must not be longer than 30 characters."
    if not _EMAIL_RE.match(email):
        errors["email"] = "Please enter a valid email address."
    if len(bio) > 160:
        errors["bio"] = "Bio must not be longer than 160 characters."
    return errors


def validate_signup(name: str, email: str, password: str, confirm: str) -> str | None:
    """Return the first signup validation error, or ``None``."""
    if not name:
        return "Name is required"
    if not email:
        return "Email is required"
    if not password:
        return "Password is required"
    if len(password) < 6:
        return "Password must be at least 6 characters"
    if password != confirm:
        return "Passwords do not match"
    return None
