"""
Units Blueprint.

Read-only unit status and journal tail endpoints under /api.
"""

from flask import Blueprint, current_app, jsonify, request

from config import get_config
from logging_config import get_logger
from web.blueprints.auth import admin_required
from web.services import unit_service

logger = get_logger(__name__)

units_bp = Blueprint("units", __name__, url_prefix="/api")


def _setting(key: str):
    if key in current_app.config:
        return current_app.config[key]
    return get_config()[key]


def _required_unit():
    unit = request.args.get("unit", "")
    if not unit.strip():
        return None
    return unit


@units_bp.route("/status", methods=["GET"])
@admin_required
def unit_status():
    """Returns the systemd status of ``?unit=``, 404 if it cannot be read."""
    unit = _required_unit()
    if unit is None:
        return jsonify({"error": "unit is required"}), 400

    try:
        with unit_service.cancellation_scope(
            _setting("QUERY_TIMEOUT_SECONDS")
        ) as cancel_event:
            status = unit_service.get_unit_status(unit, cancel_event)
    except unit_service.QueryCancelled:
        logger.warning(f"Status query for {unit} cancelled")
        return jsonify({"error": "query cancelled"}), 504
    except Exception as e:
        logger.error(f"Status query error for {unit}: {e}")
        return jsonify({"status": "error", "message": str(e)}), 500

    if status is None:
        return jsonify({"error": "unit not found"}), 404
    return jsonify(status)


@units_bp.route("/logs", methods=["GET"])
@admin_required
def unit_logs():
    """
    Returns the journal tail of ``?unit=``.

    Query parameters:
        priority: minimum priority, defaults to DEFAULT_LOG_PRIORITY
        lines: line count, defaults to DEFAULT_LOG_LINES, clamped to [1, 2000]
    """
    unit = _required_unit()
    if unit is None:
        return jsonify({"error": "unit is required"}), 400

    priority = request.args.get("priority", "")
    if not priority.strip():
        priority = _setting("DEFAULT_LOG_PRIORITY")

    raw_lines = request.args.get("lines", "")
    if raw_lines.strip():
        try:
            lines = int(raw_lines)
        except ValueError:
            return jsonify({"error": "lines must be an integer"}), 400
    else:
        lines = _setting("DEFAULT_LOG_LINES")

    try:
        with unit_service.cancellation_scope(
            _setting("QUERY_TIMEOUT_SECONDS")
        ) as cancel_event:
            data = unit_service.tail_unit_logs(unit, lines, priority, cancel_event)
    except unit_service.QueryCancelled:
        logger.warning(f"Log query for {unit} cancelled")
        return jsonify({"error": "query cancelled"}), 504
    except Exception as e:
        logger.error(f"Log query error for {unit}: {e}")
        return jsonify({"status": "error", "message": str(e)}), 500

    return jsonify({"lines": data})
