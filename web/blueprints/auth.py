"""
Authentication Blueprint.

Handles login/logout routes, the /api/auth/* endpoints and the
login_required / admin_required decorators.
"""

import logging
from functools import wraps

from flask import (
    Blueprint,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from config import get_config
from web.services import auth_service

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, template_folder="../templates")


def _setting(key: str):
    """Setting from the app config, falling back to the global config."""
    if key in current_app.config:
        return current_app.config[key]
    return get_config().get(key)


def _is_api_request() -> bool:
    return request.path == "/api" or request.path.startswith("/api/")


def _unauthenticated():
    if _is_api_request():
        return jsonify({"error": "authentication required"}), 401
    return redirect(url_for("auth.login", next=request.path))


def login_required(f):
    """Decorator to require authentication for Flask routes."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get("authenticated"):
            return _unauthenticated()
        return f(*args, **kwargs)

    return decorated_function


def admin_required(f):
    """Decorator to require a signed-in user on the ADMIN_EMAILS allow-list."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get("authenticated"):
            return _unauthenticated()
        if not auth_service.is_admin(session.get("email"), _setting("ADMIN_EMAILS")):
            logger.warning(f"Access denied for {session.get('email')} on {request.path}")
            if _is_api_request():
                return jsonify({"error": "forbidden"}), 403
            return "Forbidden", 403
        return f(*args, **kwargs)

    return decorated_function


def _sign_in(email: str) -> None:
    session["authenticated"] = True
    session["email"] = email
    session["name"] = auth_service.display_name(email)


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    """Login page and authentication handler."""
    error = None
    next_url = auth_service.get_redirect_target(request.args.get("next"))

    if request.method == "POST":
        email = request.form.get("email", "").strip()
        password = request.form.get("password", "")
        next_url = auth_service.get_redirect_target(request.form.get("next"))

        if auth_service.authenticate(email, password, _setting("ADMIN_PASSWORD")):
            _sign_in(email)
            logger.info(f"User {email} authenticated successfully.")
            return redirect(next_url)
        else:
            error = "Invalid e-mail or password. Please try again."
            logger.warning("Failed login attempt.")

    return render_template("login.html", error=error, next_url=next_url)


@auth_bp.route("/logout")
def logout():
    """Logout and clear session."""
    session.clear()
    return redirect("/")


@auth_bp.route("/api/auth/me", methods=["GET"])
@login_required
def me():
    """Returns the signed-in identity."""
    return jsonify({"email": session.get("email"), "name": session.get("name")})


@auth_bp.route("/api/auth/login", methods=["GET"])
def api_login():
    """Starts a sign-in, returning to ``returnUrl`` afterwards."""
    next_url = auth_service.get_redirect_target(request.args.get("returnUrl"))
    return redirect(url_for("auth.login", next=next_url))


@auth_bp.route("/api/auth/logout", methods=["GET"])
def api_logout():
    session.clear()
    return redirect("/")
