"""Session Store: the current demo identity and its persistence.

The store is constructed explicitly with a storage backend; the web app
builds one per request over the signed session cookie and the CLI builds one
over the ``kvstore`` table.  Nothing here raises across the public methods:
failures are logged and reported through the return value.

Login is a local demo: no credential is verified.  The email alone picks one
of three synthetic identities (first match wins):

* contains ``premium`` or equals ``user@user.com`` → user, active premium, 365 days
* contains ``admin`` → admin, active professional, 365 days
* anything else → user, basic trial, 14 days
"""

import logging
import time
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from .appconfig import DEMO_PREMIUM_EMAIL, HOME_PATH, LOGIN_PATH, STORE_NAMESPACE
from .identity import Identity, Plan, Role, Subscription, SubscriptionStatus, utcnow
from .storage import StorageBackend
from .subscription import SubscriptionDisplay, get_safe_subscription
from .subscription import is_subscribed as _is_subscribed
from .subscription import is_trial_active as _is_trial_active
from .subscription import trial_days_remaining as _trial_days_remaining

log = logging.getLogger(__name__)

PAID_TERM = timedelta(days=365)
TRIAL_TERM = timedelta(days=14)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


def synthesize_identity(email: str, now: datetime) -> Identity:
    """Build the demo identity that ``login`` stores for *email*."""
    if "premium" in email or email == DEMO_PREMIUM_EMAIL:
        id_prefix, role = "user", Role.USER
        status, plan, term, auto_renew = SubscriptionStatus.ACTIVE, Plan.PREMIUM, PAID_TERM, True
    elif "admin" in email:
        id_prefix, role = "admin", Role.ADMIN
        status, plan, term, auto_renew = SubscriptionStatus.ACTIVE, Plan.PROFESSIONAL, PAID_TERM, True
    else:
        id_prefix, role = "user", Role.USER
        status, plan, term, auto_renew = SubscriptionStatus.TRIAL, Plan.BASIC, TRIAL_TERM, False

    return Identity(
        id=_new_id(id_prefix),
        name=email.split("@")[0],
        email=email,
        role=role,
        subscription=Subscription(
            id=_new_id("sub"),
            status=status,
            plan=plan,
            start_date=now,
            expires_at=now + term,
            auto_renew=auto_renew,
        ),
        created_at=now,
        updated_at=now,
    )


class SessionStore:
    """Holds the current Identity and admin flag, persisted under one key."""

    def __init__(
        self,
        storage: StorageBackend,
        namespace: str = STORE_NAMESPACE,
        clock: Callable[[], datetime] = utcnow,
        navigate: Callable[[str], None] | None = None,
        login_delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._storage = storage
        self._namespace = namespace
        self._clock = clock
        self._navigate = navigate
        self._login_delay = login_delay
        self._sleep = sleep

        self._identity: Identity | None = None
        self._is_admin = False
        self._is_loading = True

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def identity(self) -> Identity | None:
        return self._identity

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_subscribed(self) -> bool:
        return _is_subscribed(self._identity, self._clock())

    @property
    def is_trial_active(self) -> bool:
        return _is_trial_active(self._identity, self._clock())

    @property
    def trial_days_remaining(self) -> int:
        return _trial_days_remaining(self._identity, self._clock())

    @property
    def safe_subscription(self) -> SubscriptionDisplay | None:
        if self._identity is None:
            return None
        return get_safe_subscription(self._identity)

    def snapshot(self) -> dict[str, Any]:
        return {
            "user": self._identity.to_dict() if self._identity else None,
            "isAdmin": self._is_admin,
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Load the persisted identity and correct an expired subscription.

        The correction is one-shot: it runs here and nowhere else.  Storage
        is only written when the snapshot actually changes.
        """
        self._is_loading = True
        try:
            stored = self._storage.load(self._namespace)
            if not stored:
                return

            raw_user = stored.get("user")
            identity = Identity.from_dict(raw_user) if raw_user else None
            stored_admin = bool(stored.get("isAdmin", False))
            self._identity, self._is_admin = identity, stored_admin

            if identity is None:
                return

            sub = identity.subscription
            if sub is not None and sub.expires_at < self._clock() and sub.status is not SubscriptionStatus.INACTIVE:
                log.info("Subscription %s expired at %s; marking inactive", sub.id, sub.expires_at.isoformat())
                identity = identity.with_subscription(sub.with_status(SubscriptionStatus.INACTIVE))

            is_admin = identity.is_admin
            if identity != self._identity or is_admin != stored_admin:
                self._persist(identity, is_admin)
            self._identity, self._is_admin = identity, is_admin
        except Exception:
            log.exception("Error initializing session store")
        finally:
            self._is_loading = False

    def login(self, email: str, password: str) -> bool:
        """Synthesize and store a demo identity for *email*.

        Returns False only when the inputs are empty or something unexpected
        fails; the stored state is unchanged in that case.
        """
        if not email or not password:
            log.warning("Login attempted without email or password")
            return False

        self._is_loading = True
        try:
            if self._login_delay > 0:
                self._sleep(self._login_delay)

            identity = synthesize_identity(email, self._clock())
            self._persist(identity, identity.is_admin)
            self._identity, self._is_admin = identity, identity.is_admin
            log.info("Logged in %s as %s (%s)", email, identity.role.value, identity.subscription.plan.value)
        except Exception:
            log.exception("Login error")
            return False
        finally:
            self._is_loading = False

        self._emit(HOME_PATH)
        return True

    def logout(self) -> None:
        """Clear the identity and ask the caller to navigate to the login page."""
        try:
            self._persist(None, False)
        except Exception:
            log.exception("Error clearing session store")
        self._identity, self._is_admin = None, False
        self._emit(LOGIN_PATH)

    def update_user(self, identity: Identity) -> None:
        """Replace the stored identity wholesale; use ``logout`` to clear it."""
        if not isinstance(identity, Identity):
            log.error("update_user called with %r; ignoring", identity)
            return
        try:
            self._persist(identity, identity.is_admin)
        except Exception:
            log.exception("Error saving updated user %s", identity.id)
        self._identity, self._is_admin = identity, identity.is_admin

    def update_subscription(self, subscription: Subscription) -> None:
        """Replace the current identity's subscription; no-op when logged out."""
        if self._identity is None:
            return
        identity = self._identity.with_subscription(subscription)
        try:
            self._persist(identity, self._is_admin)
        except Exception:
            log.exception("Error saving subscription %s", subscription.id)
        self._identity = identity

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _persist(self, identity: Identity | None, is_admin: bool) -> None:
        self._storage.save(
            self._namespace,
            {
                "user": identity.to_dict() if identity else None,
                "isAdmin": is_admin,
            },
        )

    def _emit(self, path: str) -> None:
        if self._navigate is None:
            return
        try:
            self._navigate(path)
        except Exception:
            log.exception("Navigation callback failed for %s", path)
