"""Admin analytics dashboard data.

The figures are fixed demo values; only the recent-user timestamps move
with the clock so the subscription badges stay meaningful.
"""

from datetime import datetime, timedelta
from typing import Any

from .identity import Identity, Plan, Role, Subscription, SubscriptionStatus, utcnow
from .subscription import get_safe_subscription, is_subscribed, is_trial_active, trial_days_remaining

POPULAR_MUSCLES = [
    {"id": "biceps", "name": "Biceps Brachii", "views": 1245},
    {"id": "quadriceps", "name": "Quadriceps", "views": 1120},
    {"id": "abdominals", "name": "Abdominal Muscles", "views": 980},
    {"id": "deltoids", "name": "Deltoid Muscle", "views": 875},
    {"id": "pectoralis", "name": "Pectoralis Major", "views": 750},
]

TIME_RANGES = ("7days", "30days", "90days", "year")
DEFAULT_TIME_RANGE = "30days"

_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep"]


def _monthly(**columns: list[int]) -> list[dict[str, Any]]:
    return [{"name": month, **{k: v[i] for k, v in columns.items()}} for i, month in enumerate(_MONTHS)]


USER_GROWTH = _monthly(users=[850, 900, 950, 1000, 1050, 1100, 1150, 1200, 1248])
REVENUE = _monthly(revenue=[15000, 16500, 18000, 19500, 21000, 22500, 23000, 23500, 24389])
ENGAGEMENT = _monthly(
    views=[12500, 13000, 13500, 14000, 14500, 15000, 15500, 16000, 16500],
    sessions=[8500, 9000, 9500, 10000, 10500, 11000, 11500, 12000, 12500],
)
COMMENT_TRENDS = _monthly(
    comments=[120, 145, 162, 178, 195, 210, 230, 245, 260],
    flagged=[5, 7, 8, 10, 12, 15, 18, 20, 23],
)

DEVICE_USAGE = [
    {"name": "Desktop", "value": 45},
    {"name": "Mobile", "value": 40},
    {"name": "Tablet", "value": 15},
]

# Minutes spent and actions per session, by audience segment.
USER_SEGMENTS = [
    {"name": "Casual Users", "timeSpent": 15, "actionsPerSession": 12, "sessions": 50},
    {"name": "Regular Users", "timeSpent": 25, "actionsPerSession": 20, "sessions": 80},
    {"name": "Power Users", "timeSpent": 40, "actionsPerSession": 35, "sessions": 120},
    {"name": "Educators", "timeSpent": 60, "actionsPerSession": 50, "sessions": 30},
    {"name": "Students", "timeSpent": 35, "actionsPerSession": 30, "sessions": 90},
    {"name": "Healthcare Pros", "timeSpent": 45, "actionsPerSession": 40, "sessions": 70},
]

# A and B are the two compared cohorts; fullMark is the chart scale.
FEATURE_USAGE = [
    {"subject": "3D Model", "A": 120, "B": 110, "fullMark": 150},
    {"subject": "Videos", "A": 98, "B": 130, "fullMark": 150},
    {"subject": "Comments", "A": 86, "B": 130, "fullMark": 150},
    {"subject": "Downloads", "A": 99, "B": 100, "fullMark": 150},
    {"subject": "Search", "A": 85, "B": 90, "fullMark": 150},
    {"subject": "Notes", "A": 65, "B": 85, "fullMark": 150},
]


def normalize_time_range(value: str | None) -> str:
    """Return *value* when it names a known range, else the default."""
    return value if value in TIME_RANGES else DEFAULT_TIME_RANGE


def _recent_user(
    index: int,
    name: str,
    email: str,
    joined_days_ago: int,
    status: SubscriptionStatus,
    plan: Plan,
    started_days_ago: int,
    expires_in_days: int,
    auto_renew: bool,
    now: datetime,
) -> Identity:
    joined = now - timedelta(days=joined_days_ago)
    return Identity(
        id=f"user-{index}",
        name=name,
        email=email,
        role=Role.USER,
        created_at=joined,
        updated_at=joined,
        subscription=Subscription(
            id=f"sub-{index}",
            status=status,
            plan=plan,
            start_date=now - timedelta(days=started_days_ago),
            expires_at=now + timedelta(days=expires_in_days),
            auto_renew=auto_renew,
        ),
    )


def recent_users(now: datetime | None = None) -> list[Identity]:
    now = now or utcnow()
    return [
        _recent_user(1, "John Doe", "john@example.com", 2, SubscriptionStatus.ACTIVE, Plan.BASIC, 2, 12, True, now),
        _recent_user(2, "Jane Smith", "jane@example.com", 3, SubscriptionStatus.TRIAL, Plan.PREMIUM, 3, 11, False, now),
        _recent_user(
            3, "Bob Johnson", "bob@example.com", 5, SubscriptionStatus.INACTIVE, Plan.PROFESSIONAL, 40, -10, False, now
        ),
    ]


def build_dashboard(now: datetime | None = None, time_range: str | None = None) -> dict[str, Any]:
    """Return the dashboard payload rendered by ``/admin``.

    *time_range* only labels the payload; the demo series do not change with it.
    """
    now = now or utcnow()
    users = []
    for identity in recent_users(now):
        entry = identity.to_dict()
        entry["displaySubscription"] = get_safe_subscription(identity).to_dict()
        entry["isSubscribed"] = is_subscribed(identity, now)
        entry["isTrialActive"] = is_trial_active(identity, now)
        entry["trialDaysRemaining"] = trial_days_remaining(identity, now)
        users.append(entry)

    return {
        "totalUsers": 1248,
        "activeSubscriptions": 843,
        "totalVideos": 156,
        "recentUsers": users,
        "popularMuscles": [dict(m) for m in POPULAR_MUSCLES],
        "subscriptionStats": {
            "basic": 423,
            "premium": 312,
            "professional": 108,
        },
        "commentStats": {
            "total": 1876,
            "flagged": 23,
            "pending": 12,
        },
        "timeRange": normalize_time_range(time_range),
        "userGrowth": [dict(p) for p in USER_GROWTH],
        "revenue": [dict(p) for p in REVENUE],
        "engagement": [dict(p) for p in ENGAGEMENT],
        "deviceUsage": [dict(p) for p in DEVICE_USAGE],
        "userSegments": [dict(p) for p in USER_SEGMENTS],
        "featureUsage": [dict(p) for p in FEATURE_USAGE],
        "commentTrends": [dict(p) for p in COMMENT_TRENDS],
    }
