"""
Health Service - Web Layer Service for liveness checks.
"""

from core import health_core


def get_health() -> dict:
    """Liveness payload for the /health endpoint."""
    return health_core.get_system_health()
