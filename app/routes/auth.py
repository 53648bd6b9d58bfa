"""Authentication pages: login, demo logins, signup, forgot password, logout.

These drive the demo Session Store only.  The REST endpoints use a separate
server-verified session (see ``routes/api.py``).
"""

from dataclasses import replace

from flask import Blueprint, abort, redirect, render_template, request, url_for
from helpers import get_store, navigation_target, validate_signup

auth_bp = Blueprint("auth", __name__)

# kind -> (email, password, landing endpoint)
_DEMO_LOGINS = {
    "admin": ("admin@admin.com", "admin", "admin.index"),
    "user": ("user@user.com", "user", "pages.index"),
}


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    """Login page: any email/password pair is accepted for the demo."""
    store = get_store()
    if store.identity is not None:
        return redirect(url_for("pages.index"))

    if request.method == "POST":
        email = request.form.get("email", "").strip()
        password = request.form.get("password", "")

        error = None
        if not email:
            error = "Email is required"
        elif not password:
            error = "Password is required"
        elif not store.login(email, password):
            error = "Invalid credentials. Please try again."

        if error is None:
            return redirect(navigation_target(url_for("pages.index")))

        return render_template("login.html", page_name="Log In", error=error, email=email)

    return render_template("login.html", page_name="Log In")


@auth_bp.route("/login/demo/<kind>", methods=["POST"])
def demo_login(kind: str):
    """One-click demo logins used by the buttons on the login page."""
    if kind not in _DEMO_LOGINS:
        abort(404)
    email, password, endpoint = _DEMO_LOGINS[kind]
    get_store().login(email, password)
    return redirect(url_for(endpoint))


@auth_bp.route("/signup", methods=["GET", "POST"])
def signup():
    """Signup page: validates the form, then logs in like ``/login``."""
    if request.method == "POST":
        name = request.form.get("name", "").strip()
        email = request.form.get("email", "").strip()
        password = request.form.get("password", "")
        confirm = request.form.get("confirm", "")

        error = validate_signup(name, email, password, confirm)
        if error is None:
            store = get_store()
            if store.login(email, password):
                store.update_user(replace(store.identity, name=name))
                return redirect(url_for("pages.index"))
            error = "Failed to create account. Please try again."

        return render_template("signup.html", page_name="Sign Up", error=error, name=name, email=email)

    return render_template("signup.html", page_name="Sign Up")


@auth_bp.route("/forgot-password", methods=["GET", "POST"])
def forgot_password():
    """Password reset request: always answers the same way, sends nothing."""
    submitted = request.method == "POST"
    email = request.form.get("email", "").strip() if submitted else ""
    return render_template(
        "forgot_password.html",
        page_name="Reset Your Password",
        submitted=submitted,
        email=email,
    )


@auth_bp.route("/logout", methods=["POST"])
def logout():
    """Clear the demo identity and go wherever the store sends us."""
    get_store().logout()
    return redirect(navigation_target(url_for("auth.login")))
