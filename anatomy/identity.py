"""Identity and Subscription records held by the Session Store.

In memory every timestamp is a timezone-aware UTC ``datetime``.  The
persisted snapshot uses ISO-8601 strings and camelCase keys, e.g.::

    {
        "id": "user-3f2c...",
        "name": "jane",
        "email": "jane@example.com",
        "role": "user",
        "bio": "",
        "subscription": {
            "id": "sub-91ab...",
            "status": "trial",
            "plan": "basic",
            "startDate": "2026-10-19T09:00:00+00:00",
            "expiresAt": "2026-11-02T09:00:00+00:00",
            "autoRenew": false
        },
        "createdAt": "2026-10-19T09:00:00+00:00",
        "updatedAt": "2026-10-19T09:00:00+00:00"
    }
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class Role(Enum):
    ADMIN = "admin"
    USER = "user"


class SubscriptionStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    TRIAL = "trial"


class Plan(Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    PROFESSIONAL = "professional"


def utcnow() -> datetime:
    return datetime.now(UTC)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string; naive values are assumed to be UTC."""
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid timestamp: {value!r}")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def format_timestamp(value: datetime) -> str:
    return value.astimezone(UTC).isoformat()


@dataclass(frozen=True)
class Subscription:
    """A billing/access grant attached to at most one Identity."""

    id: str
    status: SubscriptionStatus
    plan: Plan
    start_date: datetime
    expires_at: datetime
    auto_renew: bool = False

    def with_status(self, status: SubscriptionStatus) -> Subscription:
        return replace(self, status=status)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status.value,
            "plan": self.plan.value,
            "startDate": format_timestamp(self.start_date),
            "expiresAt": format_timestamp(self.expires_at),
            "autoRenew": self.auto_renew,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subscription:
        return cls(
            id=str(data["id"]),
            status=SubscriptionStatus(data["status"]),
            plan=Plan(data["plan"]),
            start_date=parse_timestamp(data["startDate"]),
            expires_at=parse_timestamp(data["expiresAt"]),
            auto_renew=bool(data.get("autoRenew", False)),
        )


@dataclass(frozen=True)
class Identity:
    """The authenticated principal."""

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime
    bio: str = ""
    subscription: Subscription | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def with_subscription(self, subscription: Subscription | None) -> Identity:
        return replace(self, subscription=subscription)

    def with_profile(self, name: str, email: str, bio: str, updated_at: datetime) -> Identity:
        return replace(self, name=name, email=email, bio=bio, updated_at=updated_at)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "bio": self.bio,
            "subscription": self.subscription.to_dict() if self.subscription else None,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Identity:
        if not isinstance(data, dict):
            raise ValueError("Identity snapshot must be a JSON object")
        raw_subscription = data.get("subscription")
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            email=str(data["email"]),
            role=Role(data["role"]),
            bio=str(data.get("bio") or ""),
            subscription=Subscription.from_dict(raw_subscription) if raw_subscription else None,
            created_at=parse_timestamp(data["createdAt"]),
            updated_at=parse_timestamp(data["updatedAt"]),
        )
