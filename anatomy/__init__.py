"""This is the init module for anatomy"""

from .identity import Identity, Plan, Role, Subscription, SubscriptionStatus
from .session_store import SessionStore
from .storage import KeyValueStorage, MemoryStorage, StorageBackend
from .subscription import (
    SubscriptionDisplay,
    get_safe_subscription,
    is_subscribed,
    is_trial_active,
    trial_days_remaining,
)

__version__ = "0.1.0"
__all__ = [
    "Identity",
    "KeyValueStorage",
    "MemoryStorage",
    "Plan",
    "Role",
    "SessionStore",
    "StorageBackend",
    "Subscription",
    "SubscriptionDisplay",
    "SubscriptionStatus",
    "get_safe_subscription",
    "is_subscribed",
    "is_trial_active",
    "trial_days_remaining",
]
