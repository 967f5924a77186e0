# ------------------------------------------------------------------------------
# web_interface.py
# ------------------------------------------------------------------------------

import logging
import os

from flask import Flask, jsonify, request, send_from_directory

from config import get_config
from web.blueprints.auth import auth_bp
from web.blueprints.units import units_bp
from web.services import health_service

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


def create_web_interface(config: dict | None = None):
    """
    Creates and returns the Flask server for the project.

    Returns a dictionary with:
      - server: the Flask application (WSGI callable).
      - run: function starting the development server.
    """
    logger = logging.getLogger(__name__)
    config = config if config is not None else get_config()

    server = Flask(__name__, static_folder=STATIC_DIR, static_url_path="/static")
    server.config.update(config)
    server.secret_key = config["SECRET_KEY"]
    server.config["SESSION_COOKIE_NAME"] = "unitwatch_auth"
    server.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    server.config["SESSION_COOKIE_HTTPONLY"] = True

    if config["SECRET_KEY"] == "default_secret":
        logger.warning("SECRET_KEY not set in .env file, using default. THIS IS INSECURE.")
    if config["ADMIN_PASSWORD"] == "default_pass":
        logger.warning("ADMIN_PASSWORD not set in .env file, using default. THIS IS INSECURE.")
    if not config["ADMIN_EMAILS"]:
        logger.warning("ADMIN_EMAILS is empty; nobody can read unit status or logs.")

    server.register_blueprint(auth_bp)
    server.register_blueprint(units_bp)

    @server.route("/health")
    def health():
        return jsonify(health_service.get_health())

    @server.route("/")
    def index():
        return send_from_directory(STATIC_DIR, "index.html")

    @server.errorhandler(404)
    def fallback(error):
        # Unknown pages are handled client-side; unknown API routes stay 404.
        if request.method == "GET" and not request.path.startswith("/api/"):
            return send_from_directory(STATIC_DIR, "index.html")
        return jsonify({"error": "not found"}), 404

    def run(debug=False, host=None, port=None):
        server.run(
            debug=debug,
            host=host or config["HOST"],
            port=port or config["PORT"],
            threaded=True,
        )

    return {"server": server, "run": run}
