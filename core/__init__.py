"""
UnitWatch Core Package.

This package contains the core business logic of the application,
separated from the web layer. All systemd and journal queries are
coordinated through core modules.

ARCHITECTURE RULES:
- core/ modules may only import from:
  - Python standard library and third-party non-web packages
  - utils/ (process and parsing helpers)
  - config (for global configuration)

- core/ modules MUST NOT import from:
  - web/ (no Flask dependencies)
  - flask, werkzeug, or any web-specific packages
"""

__all__ = [
    "health_core",
    "introspection_core",
    "journal_core",
    "models",
    "settings_core",
    "unit_status_core",
]
