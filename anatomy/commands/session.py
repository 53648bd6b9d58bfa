"""CLI commands driving the persisted demo Session Store: login, logout, whoami."""

from tabulate import tabulate

from anatomy.core import Anatomy


def login(email: str, password: str) -> int:
    with Anatomy() as app:
        store = app.session_store()
        if not store.login(email, password):
            print("Invalid credentials. Please try again.")
            return 1
        identity = store.identity
        print(f"Logged in as {identity.email} ({identity.role.value})")
        print(f"Next: {app.navigated_to}")
        return 0


def logout() -> int:
    with Anatomy() as app:
        store = app.session_store()
        store.logout()
        print("Logged out.")
        print(f"Next: {app.navigated_to}")
        return 0


def whoami() -> int:
    """Print the stored identity and its derived subscription flags."""
    with Anatomy() as app:
        store = app.session_store()
        identity = store.identity
        if identity is None:
            print("Not logged in.")
            return 1

        display = store.safe_subscription
        rows = [
            ["Name", identity.name],
            ["Email", identity.email],
            ["Role", identity.role.value],
            ["Admin", "yes" if store.is_admin else "no"],
            ["Plan", display.plan],
            ["Status", display.status],
            ["Expires", display.expires_at or "—"],
            ["Auto-renew", "yes" if display.auto_renew else "no"],
            ["Subscribed", "yes" if store.is_subscribed else "no"],
            ["Trial active", "yes" if store.is_trial_active else "no"],
            ["Trial days left", store.trial_days_remaining],
        ]
        print(tabulate(rows, tablefmt="simple"))
        return 0
