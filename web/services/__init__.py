"""
UnitWatch Services Package.

This package contains service layer modules that encapsulate business logic,
separating it from Flask routes for better testability and maintainability.

ARCHITECTURE RULE:
- Services may ONLY import from core/* modules
- Services MUST NOT import directly from utils/
"""

from web.services import (
    auth_service,
    health_service,
    unit_service,
)

__all__ = [
    "auth_service",
    "health_service",
    "unit_service",
]
