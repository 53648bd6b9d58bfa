"""anatomy explorer web application: entry point and blueprint registration."""

import logging
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Sentry: initialise before anything else so all errors are captured
# ---------------------------------------------------------------------------
if _sentry_dsn := os.environ.get("SENTRY_DSN"):
    import sentry_sdk

    def _traces_sampler(sampling_context: dict) -> float:
        if sampling_context.get("wsgi_environ", {}).get("PATH_INFO") == "/health":
            return 0.0
        return 1.0

    sentry_sdk.init(
        dsn=_sentry_dsn,
        environment=os.environ.get("SENTRY_ENV"),
        send_default_pii=True,
        traces_sampler=_traces_sampler,
    )

from anatomy.session_store import PAID_TERM
from db_init import _init_db  # noqa: F401
from flask import Flask, abort, g, render_template, request
from flask_login import LoginManager, current_user

_access_log = logging.getLogger("anatomy.access")

# ---------------------------------------------------------------------------
# Logging: inject the server account id into every record
# ---------------------------------------------------------------------------


class _UserIdFilter(logging.Filter):
    """Adds ``user_id`` to every log record.

    Uses ``g.uid`` (set per-request by ``_set_user_context``) inside a Flask
    request context and ``0`` everywhere else.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            from flask import g as flask_g
            from flask import has_request_context

            record.user_id = flask_g.get("uid", 0) if has_request_context() else 0
        except Exception:
            record.user_id = "?"
        return True


def _configure_logging() -> None:
    """Attach the user_id filter + formatter to the root logger."""
    handler = logging.StreamHandler()
    handler.addFilter(_UserIdFilter())
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s uid=%(user_id)s %(name)s: %(message)s"))
    root = logging.getLogger()
    # Avoid duplicate handlers when the module is reloaded in tests.
    if not any(isinstance(h, logging.StreamHandler) and hasattr(h, "stream") for h in root.handlers):
        root.addHandler(handler)
    root.setLevel(logging.INFO)


_configure_logging()


# ---------------------------------------------------------------------------
# Flask app
# ---------------------------------------------------------------------------

app_dir = Path(__file__).parent
app = Flask(
    __name__,
    template_folder=str(app_dir / "templates"),
    static_folder=str(app_dir / "static"),
)

app.secret_key = os.environ["SESSION_KEY"]
# The demo session cookie lives as long as a paid subscription.
app.config["PERMANENT_SESSION_LIFETIME"] = PAID_TERM

login_manager = LoginManager()
login_manager.init_app(app)


@login_manager.user_loader
def _load_user(user_id: str):
    from anatomy.accounts import User

    try:
        return User.get_or_none(User.id == int(user_id))
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Request hooks
# ---------------------------------------------------------------------------


@app.before_request
def _maintenance_mode():
    """Serve the maintenance page for everything but the API and static files."""
    from anatomy.appconfig import is_maintenance_mode

    if not is_maintenance_mode():
        return
    path = request.path
    if "/api/" in path or path.startswith("/static") or path.startswith("/maintenance") or path == "/health":
        return
    return render_template("maintenance.html", page_name="Maintenance"), 503


@app.before_request
def _set_user_context():
    # Initialise g.uid so the log filter always has a value for this request,
    # even if we return early or abort below.
    g.uid = 0

    if request.endpoint in ("static", "api.health"):
        return

    try:
        from anatomy.db import get_db

        if not _init_db():
            raise RuntimeError("database unavailable")
        get_db().connect(reuse_if_open=True)
    except Exception:
        abort(503)

    if current_user.is_authenticated:
        g.uid = current_user.id


@app.teardown_request
def _close_db(exc):
    try:
        from anatomy.db import get_db

        db = get_db()
        if not db.is_closed():
            db.close()
    except RuntimeError:
        # Database not configured, nothing to close
        pass


@app.context_processor
def inject_session_store():
    from helpers import display_date, get_store

    return {"store": get_store(), "display_date": display_date}


@app.after_request
def _log_request(response):
    if request.endpoint != "api.health":
        _access_log.info("%s %s %s", request.method, request.path, response.status_code)
    return response


# ---------------------------------------------------------------------------
# Blueprint registration
# ---------------------------------------------------------------------------

from routes.account import account_bp
from routes.admin import admin_bp
from routes.api import api_bp
from routes.auth import auth_bp
from routes.pages import pages_bp

app.register_blueprint(pages_bp)
app.register_blueprint(auth_bp)
app.register_blueprint(account_bp)
app.register_blueprint(admin_bp)
app.register_blueprint(api_bp)

# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    print("Starting anatomy explorer web app...")
    print("Server starting at: http://localhost:5000")
    print("  Home:      http://localhost:5000")
    print("  Login:     http://localhost:5000/login")
    print("  Admin:     http://localhost:5000/admin")
    print("  Health:    http://localhost:5000/health")
    print("\nPress Ctrl+C to stop")

    try:
        app.run(debug=os.environ.get("FLASK_DEBUG") == "1", host="0.0.0.0", port=5000, threaded=True)
    except Exception as e:
        print(f"Server failed to start: {e}")
        exit(1)
