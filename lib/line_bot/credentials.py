"""
Per-call credential resolution.

The client instance is long-lived and shared, so the bearer token is resolved
for every request instead of being stored on the shared HTTP client.
"""

from typing import Dict, Optional

from .constants import AUTH_HEADER, AUTH_SCHEME


def resolveAccessToken(defaultToken: str, overrideToken: Optional[str] = None) -> str:
    """Pick the token for a single request.

    Override wins whenever it is given, even if it is an empty string.
    """
    return defaultToken if overrideToken is None else overrideToken


def buildAuthorizationHeader(defaultToken: str, overrideToken: Optional[str] = None) -> Dict[str, str]:
    """Build ``Authorization`` header for a single request.

    Args:
        defaultToken: Instance-wide channel access token
        overrideToken: Per-call token (optional)

    Returns:
        Header dict like ``{"Authorization": "Bearer <token>"}``
    """
    return {AUTH_HEADER: f"{AUTH_SCHEME} {resolveAccessToken(defaultToken, overrideToken)}"}
