"""
Auth Service - Web Layer Service for Authentication.

Handles password checks, the admin e-mail allow-list and redirect target
validation.
"""

import hmac

from core import settings_core


def authenticate(
    email: str, provided_password: str, expected_password: str | None = None
) -> bool:
    """
    Verify the provided credentials against the configuration.

    Args:
        email: E-mail address the user signs in with.
        provided_password: The password to check.
        expected_password: Password to compare with; ADMIN_PASSWORD if None.

    Returns:
        True if an e-mail was given and the password matches, False otherwise.
    """
    if not email or not email.strip():
        return False

    if expected_password is None:
        expected_password = settings_core.get_setting("ADMIN_PASSWORD", "")
    target = expected_password or ""
    if not target:
        return False

    return hmac.compare_digest(
        (provided_password or "").encode("utf-8"), target.encode("utf-8")
    )


def is_admin(email: str | None, allowed: list[str] | None = None) -> bool:
    """
    Check an e-mail address against an allow-list, ADMIN_EMAILS if None.

    An empty allow-list admits nobody.
    """
    if not email or not email.strip():
        return False
    if allowed is None:
        allowed = settings_core.get_setting("ADMIN_EMAILS", []) or []
    return email.strip().lower() in {a.lower() for a in allowed}


def display_name(email: str) -> str:
    """Derive a display name from the local part of an e-mail address."""
    return email.split("@", 1)[0]


def get_redirect_target(next_param: str | None, default: str = "/") -> str:
    """
    Determine the redirect target URL.

    Args:
        next_param: The 'next' URL parameter or form field.
        default: Default URL if next_param is invalid/missing.

    Returns:
        The target URL. Only same-site absolute paths are accepted.
    """
    if not next_param or not next_param.strip():
        return default

    target = next_param.strip()
    if not target.startswith("/") or target.startswith("//") or "\\" in target:
        return default
    return target
