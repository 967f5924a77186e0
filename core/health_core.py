"""
Health Core - Liveness status.

Reports process liveness only; systemd is not queried here.
"""

import datetime
from typing import Any


def get_system_health() -> dict[str, Any]:
    """
    Returns a liveness snapshot.

    Returns:
        Dictionary with a fixed status and the current UTC timestamp.
    """
    return {
        "status": "healthy",
        "ts": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }
