# config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file.
load_dotenv()

_config: dict | None = None


@dataclass(frozen=True)
class IntrospectionSettings:
    """Immutable settings handed to the systemd/journald readers."""

    systemctl_bin: str = "systemctl"
    journalctl_bin: str = "journalctl"
    poll_interval: float = 0.05


def _parse_email_list(raw: str | None) -> list[str]:
    """Split a comma-separated allow-list into trimmed, lower-cased entries."""
    if not raw:
        return []
    return [item.strip().lower() for item in raw.split(",") if item.strip()]


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(float(os.getenv(name, default)))
    except (TypeError, ValueError):
        return default


def load_config():
    """
    Loads configuration from environment variables and returns a dictionary.
    """
    debug_mode = os.getenv("DEBUG_MODE", "False").lower() == "true"

    config = {
        # General Settings
        "DEBUG_MODE": debug_mode,
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "DEBUG" if debug_mode else "WARNING").upper(),
        "HOST": os.getenv("HOST", "0.0.0.0"),
        "PORT": _int_env("PORT", 8050),

        # Authentication
        "SECRET_KEY": os.getenv("SECRET_KEY", "default_secret"),
        "ADMIN_PASSWORD": os.getenv("ADMIN_PASSWORD", "default_pass"),
        "ADMIN_EMAILS": _parse_email_list(os.getenv("ADMIN_EMAILS", "")),

        # Query Settings
        "QUERY_TIMEOUT_SECONDS": _float_env("QUERY_TIMEOUT_SECONDS", 10.0),
        "DEFAULT_LOG_LINES": _int_env("DEFAULT_LOG_LINES", 200),
        "DEFAULT_LOG_PRIORITY": os.getenv("DEFAULT_LOG_PRIORITY", "warning"),

        # External Tools
        "SYSTEMCTL_BIN": os.getenv("SYSTEMCTL_BIN", "systemctl"),
        "JOURNALCTL_BIN": os.getenv("JOURNALCTL_BIN", "journalctl"),
        "PROCESS_POLL_INTERVAL": _float_env("PROCESS_POLL_INTERVAL", 0.05),
    }
    return config


def get_config() -> dict:
    """Returns the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_introspection_settings(config: dict | None = None) -> IntrospectionSettings:
    """Builds the immutable reader settings from a configuration dictionary."""
    cfg = config if config is not None else get_config()
    return IntrospectionSettings(
        systemctl_bin=cfg.get("SYSTEMCTL_BIN") or "systemctl",
        journalctl_bin=cfg.get("JOURNALCTL_BIN") or "journalctl",
        poll_interval=cfg.get("PROCESS_POLL_INTERVAL") or 0.05,
    )


if __name__ == "__main__":
    # For testing purposes, print the configuration
    config = load_config()
    from pprint import pprint

    pprint(config)
