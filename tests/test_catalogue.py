"""Tests for the muscle catalogue and the admin dashboard payload."""

from datetime import UTC, datetime

from anatomy.dashboard import build_dashboard
from anatomy.muscles import MUSCLE_DATA, get_muscle

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


class TestMuscles:
    def test_known_muscle(self):
        muscle = get_muscle("biceps")
        assert muscle["name"] == "Biceps Brachii"
        assert muscle["conditions"][0]["id"] == "biceps-condition-1"
        assert "Elbow flexion" in muscle["functions"]

    def test_unknown_muscle(self):
        assert get_muscle("spleen") is None

    def test_returns_copy(self):
        get_muscle("biceps")["functions"].append("juggling")
        assert "juggling" not in MUSCLE_DATA["biceps"]["functions"]

    def test_popular_muscles_exist_in_catalogue(self):
        for entry in build_dashboard(NOW)["popularMuscles"]:
            assert get_muscle(entry["id"]) is not None


class TestDashboard:
    def test_totals(self):
        dashboard = build_dashboard(NOW)
        assert dashboard["totalUsers"] == 1248
        assert dashboard["activeSubscriptions"] == 843
        assert dashboard["subscriptionStats"] == {"basic": 423, "premium": 312, "professional": 108}

    def test_recent_user_flags(self):
        users = {u["email"]: u for u in build_dashboard(NOW)["recentUsers"]}

        # Active but on the basic plan: never counted as subscribed.
        assert users["john@example.com"]["isSubscribed"] is False
        assert users["jane@example.com"]["isTrialActive"] is True
        assert users["jane@example.com"]["trialDaysRemaining"] == 11
        assert users["bob@example.com"]["displaySubscription"]["status"] == "inactive"
        assert users["bob@example.com"]["displaySubscription"]["plan"] == "Professional"

    def test_chart_series(self):
        dashboard = build_dashboard(NOW)
        assert dashboard["userGrowth"][-1] == {"name": "Sep", "users": 1248}
        assert dashboard["revenue"][-1]["revenue"] == 24389
        assert dashboard["engagement"][0] == {"name": "Jan", "views": 12500, "sessions": 8500}
        assert dashboard["commentTrends"][-1] == {"name": "Sep", "comments": 260, "flagged": 23}
        assert sum(d["value"] for d in dashboard["deviceUsage"]) == 100
        assert [s["name"] for s in dashboard["userSegments"]][-1] == "Healthcare Pros"
        assert dashboard["featureUsage"][0]["subject"] == "3D Model"

    def test_series_are_copies(self):
        build_dashboard(NOW)["userGrowth"][0]["users"] = 0
        assert build_dashboard(NOW)["userGrowth"][0]["users"] == 850

    def test_time_range(self):
        assert build_dashboard(NOW)["timeRange"] == "30days"
        assert build_dashboard(NOW, time_range="year")["timeRange"] == "year"
        assert build_dashboard(NOW, time_range="decade")["timeRange"] == "30days"
