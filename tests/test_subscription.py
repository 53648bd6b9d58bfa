"""Tests for the derived subscription flags and display record."""

from datetime import UTC, datetime, timedelta

import pytest

from anatomy.identity import Identity, Plan, Role, Subscription, SubscriptionStatus
from anatomy.subscription import (
    get_safe_subscription,
    is_subscribed,
    is_trial_active,
    trial_days_remaining,
)

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


def _identity(status=SubscriptionStatus.ACTIVE, plan=Plan.PREMIUM, expires_in=timedelta(days=30), with_sub=True):
    subscription = None
    if with_sub:
        subscription = Subscription(
            id="sub-1",
            status=status,
            plan=plan,
            start_date=NOW - timedelta(days=1),
            expires_at=NOW + expires_in,
            auto_renew=True,
        )
    return Identity(
        id="user-1",
        name="jane",
        email="jane@example.com",
        role=Role.USER,
        created_at=NOW - timedelta(days=10),
        updated_at=NOW - timedelta(days=10),
        subscription=subscription,
    )


class TestIsSubscribed:
    def test_active_paid_unexpired(self):
        assert is_subscribed(_identity(plan=Plan.PREMIUM), NOW)
        assert is_subscribed(_identity(plan=Plan.PROFESSIONAL), NOW)

    @pytest.mark.parametrize("status", list(SubscriptionStatus))
    def test_basic_plan_never_counts(self, status):
        assert not is_subscribed(_identity(status=status, plan=Plan.BASIC, expires_in=timedelta(days=365)), NOW)

    def test_trial_status_is_not_subscribed(self):
        assert not is_subscribed(_identity(status=SubscriptionStatus.TRIAL), NOW)

    def test_expired_active_is_not_subscribed(self):
        assert not is_subscribed(_identity(expires_in=timedelta(seconds=-1)), NOW)

    def test_expiry_must_be_strictly_after_now(self):
        assert not is_subscribed(_identity(expires_in=timedelta(0)), NOW)

    def test_no_subscription_or_identity(self):
        assert not is_subscribed(_identity(with_sub=False), NOW)
        assert not is_subscribed(None, NOW)


class TestIsTrialActive:
    def test_unexpired_trial(self):
        assert is_trial_active(_identity(status=SubscriptionStatus.TRIAL, plan=Plan.BASIC), NOW)

    def test_stale_trial_status_after_expiry(self):
        """A stored ``trial`` status past its expiry is not an active trial."""
        identity = _identity(status=SubscriptionStatus.TRIAL, plan=Plan.BASIC, expires_in=timedelta(days=14))
        assert identity.subscription.status is SubscriptionStatus.TRIAL
        assert not is_trial_active(identity, NOW + timedelta(days=15))
        # The stored status is left untouched.
        assert identity.subscription.status is SubscriptionStatus.TRIAL

    def test_active_status_is_not_trial(self):
        assert not is_trial_active(_identity(status=SubscriptionStatus.ACTIVE), NOW)

    def test_no_subscription(self):
        assert not is_trial_active(_identity(with_sub=False), NOW)


class TestTrialDaysRemaining:
    def test_full_trial(self):
        identity = _identity(status=SubscriptionStatus.TRIAL, plan=Plan.BASIC, expires_in=timedelta(days=14))
        assert trial_days_remaining(identity, NOW) == 14

    def test_partial_day_rounds_up(self):
        identity = _identity(status=SubscriptionStatus.TRIAL, plan=Plan.BASIC, expires_in=timedelta(days=2, hours=1))
        assert trial_days_remaining(identity, NOW) == 3

    def test_last_second_counts_as_one_day(self):
        identity = _identity(status=SubscriptionStatus.TRIAL, plan=Plan.BASIC, expires_in=timedelta(seconds=1))
        assert trial_days_remaining(identity, NOW) == 1

    def test_exact_expiry_is_zero(self):
        identity = _identity(status=SubscriptionStatus.TRIAL, plan=Plan.BASIC, expires_in=timedelta(0))
        assert trial_days_remaining(identity, NOW) == 0

    def test_never_negative(self):
        identity = _identity(status=SubscriptionStatus.TRIAL, plan=Plan.BASIC, expires_in=timedelta(days=-5))
        assert trial_days_remaining(identity, NOW) == 0

    def test_zero_when_not_on_trial(self):
        assert trial_days_remaining(_identity(status=SubscriptionStatus.ACTIVE), NOW) == 0
        assert trial_days_remaining(None, NOW) == 0


class TestGetSafeSubscription:
    def test_no_subscription_returns_trial_record(self):
        identity = _identity(with_sub=False)
        display = get_safe_subscription(identity)
        assert display.plan == "Trial"
        assert display.status == "active"
        assert display.auto_renew is False
        assert display.expires_at == ""
        assert display.start_date == identity.created_at.isoformat()

    def test_no_subscription_ignores_other_fields(self):
        admin = Identity(
            id="admin-9",
            name="root",
            email="admin@admin.com",
            role=Role.ADMIN,
            bio="hello",
            created_at=NOW,
            updated_at=NOW,
        )
        display = get_safe_subscription(admin)
        assert display.plan == "Trial"
        assert display.expires_at == ""

    @pytest.mark.parametrize(
        ("plan", "label"),
        [(Plan.BASIC, "Basic"), (Plan.PREMIUM, "Premium"), (Plan.PROFESSIONAL, "Professional")],
    )
    def test_plan_is_capitalised(self, plan, label):
        assert get_safe_subscription(_identity(plan=plan)).plan == label

    def test_other_fields_pass_through(self):
        identity = _identity(status=SubscriptionStatus.INACTIVE)
        display = get_safe_subscription(identity)
        assert display.status == "inactive"
        assert display.auto_renew is True
        assert display.start_date == identity.subscription.start_date.isoformat()
        assert display.expires_at == identity.subscription.expires_at.isoformat()

    def test_to_dict_uses_display_keys(self):
        data = get_safe_subscription(_identity(with_sub=False)).to_dict()
        assert data["plan"] == "Trial"
        assert data["expiresAt"] == ""
        assert data["autoRenew"] is False
