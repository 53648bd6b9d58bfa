"""Derived subscription flags.

Everything here is a pure function of an Identity snapshot and the current
time.  Nothing is cached and nothing is written back: a subscription whose
``expires_at`` has passed still carries its stored status until the Session
Store corrects it on the next ``initialize()``, so the flags below compare
against ``expires_at`` themselves.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import NamedTuple

from .identity import Identity, Plan, SubscriptionStatus, format_timestamp, utcnow

SECONDS_PER_DAY = 86400


class SubscriptionDisplay(NamedTuple):
    """Display-ready subscription values (all strings, as shown in the UI)."""

    plan: str
    status: str
    auto_renew: bool
    start_date: str
    expires_at: str

    def to_dict(self) -> dict:
        return {
            "plan": self.plan,
            "status": self.status,
            "autoRenew": self.auto_renew,
            "startDate": self.start_date,
            "expiresAt": self.expires_at,
        }


def _now(now: datetime | None) -> datetime:
    return now if now is not None else utcnow()


def is_subscribed(identity: Identity | None, now: datetime | None = None) -> bool:
    """True for an unexpired ``active`` subscription on a paid plan.

    ``basic`` never counts, even when active and unexpired.
    """
    if identity is None or identity.subscription is None:
        return False
    sub = identity.subscription
    return sub.status is SubscriptionStatus.ACTIVE and sub.plan is not Plan.BASIC and sub.expires_at > _now(now)


def is_trial_active(identity: Identity | None, now: datetime | None = None) -> bool:
    if identity is None or identity.subscription is None:
        return False
    sub = identity.subscription
    return sub.status is SubscriptionStatus.TRIAL and sub.expires_at > _now(now)


def trial_days_remaining(identity: Identity | None, now: datetime | None = None) -> int:
    """Whole days left in an active trial, rounded up; 0 otherwise."""
    now = _now(now)
    if not is_trial_active(identity, now):
        return 0
    remaining = (identity.subscription.expires_at - now).total_seconds()
    return max(0, math.ceil(remaining / SECONDS_PER_DAY))


def get_safe_subscription(identity: Identity) -> SubscriptionDisplay:
    """Return display values for the identity's subscription.

    An identity without a subscription gets a fabricated "Trial" record; its
    plan and status do not reflect billing reality.
    """
    sub = identity.subscription
    if sub is None:
        return SubscriptionDisplay(
            plan="Trial",
            status=SubscriptionStatus.ACTIVE.value,
            auto_renew=False,
            start_date=format_timestamp(identity.created_at),
            expires_at="",
        )

    return SubscriptionDisplay(
        plan=sub.plan.value[:1].upper() + sub.plan.value[1:],
        status=sub.status.value,
        auto_renew=sub.auto_renew,
        start_date=format_timestamp(sub.start_date),
        expires_at=format_timestamp(sub.expires_at),
    )
