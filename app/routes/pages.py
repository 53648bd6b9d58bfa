"""Page routes (HTML views) for the anatomy explorer web app."""

from flask import Blueprint, render_template
from helpers import get_store

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/")
def index():
    """Home page: greeting plus the subscription banner."""
    store = get_store()
    return render_template(
        "index.html",
        page_name="Anatomy Explorer",
        identity=store.identity,
        is_subscribed=store.is_subscribed,
        is_trial_active=store.is_trial_active,
        trial_days_remaining=store.trial_days_remaining,
    )


@pages_bp.route("/maintenance")
def maintenance():
    return render_template("maintenance.html", page_name="Maintenance")
