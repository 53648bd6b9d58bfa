"""Account routes: profile view and edit."""

from anatomy.identity import utcnow
from flask import Blueprint, redirect, render_template, request, url_for
from helpers import get_store, validate_profile

account_bp = Blueprint("account", __name__)


@account_bp.route("/account/profile", methods=["GET", "POST"])
def profile():
    """Show the profile and subscription; POST saves name, email and bio."""
    store = get_store()
    identity = store.identity
    if identity is None:
        return redirect(url_for("auth.login"))

    errors: dict[str, str] = {}
    saved = False
    form = {"name": identity.name, "email": identity.email, "bio": identity.bio}

    if request.method == "POST":
        form = {
            "name": request.form.get("name", "").strip(),
            "email": request.form.get("email", "").strip(),
            "bio": request.form.get("bio", "").strip(),
        }
        errors = validate_profile(form["name"], form["email"], form["bio"])
        if not errors:
            store.update_user(identity.with_profile(form["name"], form["email"], form["bio"], utcnow()))
            identity = store.identity
            saved = True

    return render_template(
        "profile.html",
        page_name="Account Settings",
        identity=identity,
        form=form,
        errors=errors,
        saved=saved,
        subscription=store.safe_subscription,
    )
