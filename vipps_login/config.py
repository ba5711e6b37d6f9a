"""Configuration helpers for vipps_login.

This module provides small helpers to read Vipps-related configuration from
environment variables used across the package.
"""

import os


def vipps_authority() -> str:
    """Get the configured Vipps authority URL from environment variables.

    Returns:
        The authority from the VIPPS_AUTHORITY environment variable, or an
        empty string if not set.
    """
    return os.environ.get("VIPPS_AUTHORITY", "")


def require_vipps_authority() -> str:
    """Return the VIPPS_AUTHORITY environment variable or raise.

    Raises:
        RuntimeError: If the VIPPS_AUTHORITY environment variable is not set.
    """
    authority = vipps_authority()
    if not authority.strip():
        raise RuntimeError("VIPPS_AUTHORITY environment variable is not set.")
    return authority
