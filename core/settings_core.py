"""
Settings Core - Settings Access.

Provides read access to configuration values separated from the web layer.
"""

from typing import Any

from config import get_config


def get_setting(key: str, default: Any = None) -> Any:
    """
    Gets a single setting value.

    Args:
        key: Setting key
        default: Default value if key not found

    Returns:
        The setting value or default
    """
    return get_config().get(key, default)
