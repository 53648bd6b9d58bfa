"""REST API routes: server session, comments, muscle lookup, health.

Everything here authenticates against the ``user`` table through flask-login.
The demo Session Store is never consulted.
"""

import logging
from collections.abc import Mapping

from anatomy.accounts import Comment, User, comments_for_post
from anatomy.muscles import get_muscle
from flask import Blueprint, jsonify, request
from flask_login import current_user, login_user, logout_user

log = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _coerce_positive_int(value) -> int | None:
    """Coerce a JSON value to a positive integer, or return ``None``."""
    if isinstance(value, bool):
        value = int(value)
    elif isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if isinstance(value, int) and value > 0:
        return value
    return None


def _parse_comment(body) -> tuple[dict | None, list[dict]]:
    """Validate a comment payload; return ``(data, errors)``."""
    if not isinstance(body, dict):
        return None, [{"path": [], "message": "Expected a JSON object"}]

    errors = []
    content = body.get("content")
    if not isinstance(content, str) or not content:
        errors.append({"path": ["content"], "message": "Comment text is required"})

    post_id = _coerce_positive_int(body.get("postId"))
    if post_id is None:
        errors.append({"path": ["postId"], "message": "Post ID is required"})

    if errors:
        return None, errors
    return {"content": content, "post_id": post_id}, []


# ---------------------------------------------------------------------------
# Server-verified session
# ---------------------------------------------------------------------------


@api_bp.route("/api/auth/login", methods=["POST"])
def api_login():
    """Verify email + password against the account table and start a session."""
    data = request.get_json(silent=True) if request.is_json else request.form
    if not isinstance(data, Mapping):
        data = {}
    email = data.get("email")
    password = data.get("password")
    email = email.strip().lower() if isinstance(email, str) else ""
    if not isinstance(password, str):
        password = ""

    if not email or not password:
        return jsonify({"error": "Email and password are required."}), 400

    user = User.get_or_none(User.email == email)
    if user is None or not user.check_password(password):
        return jsonify({"error": "Invalid email or password."}), 401
    if not user.is_active:
        return jsonify({"error": "Your account is not active."}), 403

    login_user(user)
    log.info("Server session started for user %s", user.id)
    return jsonify({"user": user.to_dict()})


@api_bp.route("/api/auth/logout", methods=["POST"])
def api_logout():
    logout_user()
    return jsonify({"ok": True})


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


@api_bp.route("/api/comments", methods=["GET"])
def list_comments():
    """Comments for ``?postId=``, newest first, with authors embedded."""
    raw_post_id = request.args.get("postId")
    if not raw_post_id:
        return jsonify({"error": "Missing postId parameter"}), 400
    try:
        post_id = int(raw_post_id)
    except ValueError:
        return jsonify({"error": "Invalid postId parameter"}), 400

    try:
        comments = comments_for_post(post_id)
        return jsonify([c.to_dict(include_author=True) for c in comments])
    except Exception:
        log.exception("[GET /api/comments]")
        return jsonify({"error": "Failed to fetch comments"}), 500


@api_bp.route("/api/comments", methods=["POST"])
def create_comment():
    """Create a comment as the signed-in account."""
    if not current_user.is_authenticated:
        return jsonify({"error": "Authentication required"}), 401

    data, errors = _parse_comment(request.get_json(silent=True))
    if errors:
        return jsonify({"error": "Invalid request data", "details": errors}), 400

    try:
        user = User.get_or_none(User.email == current_user.email)
        if user is None:
            return jsonify({"error": "User not found"}), 404

        comment = Comment.create(content=data["content"], post_id=data["post_id"], author=user)
        return jsonify(comment.to_dict())
    except Exception:
        log.exception("[POST /api/comments]")
        return jsonify({"error": "Failed to create comment"}), 500


# ---------------------------------------------------------------------------
# Muscles
# ---------------------------------------------------------------------------


@api_bp.route("/api/muscles/<muscle_id>")
def muscle_detail(muscle_id: str):
    muscle = get_muscle(muscle_id)
    if muscle is None:
        return jsonify({"error": "Muscle not found"}), 404
    return jsonify(muscle)


@api_bp.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "healthy", "app": "anatomy-web"})
