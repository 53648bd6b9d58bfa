"""Admin routes: analytics dashboard, visible to admin identities only."""

from anatomy.dashboard import TIME_RANGES, build_dashboard
from flask import Blueprint, jsonify, redirect, render_template, request, url_for
from helpers import get_store

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/admin")
def index():
    """Admin dashboard page."""
    if not get_store().is_admin:
        return redirect(url_for("auth.login"))
    return render_template(
        "admin.html",
        page_name="Admin",
        dashboard=build_dashboard(time_range=request.args.get("range")),
        time_ranges=TIME_RANGES,
    )


@admin_bp.route("/api/admin/dashboard")
def dashboard_api():
    """Dashboard data as JSON; ``?range=`` picks the reporting window."""
    if not get_store().is_admin:
        return jsonify({"error": "Admin access required"}), 403
    return jsonify(build_dashboard(time_range=request.args.get("range")))
