"""Keep the API token and credentials out of log output."""

import re
from collections.abc import Mapping


# Headers whose values are secrets
SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "set-cookie",
        "x-cachet-token",
    }
)

REDACTED_VALUE = "[REDACTED]"

_URL_CREDENTIALS_PATTERN = re.compile(r"(https?://)([^:/@]+):([^@/]+)@")


def is_sensitive_header(header_name: str) -> bool:
    """Check whether a header carries a secret, ignoring case."""
    return header_name.lower() in SENSITIVE_HEADERS


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy request headers with secret values masked.

    Args:
        headers: Headers as sent, e.g. ``httpx.Client.headers``.

    Returns:
        New dictionary safe to log.
    """
    return {
        name: REDACTED_VALUE if is_sensitive_header(name) else value
        for name, value in headers.items()
    }


def redact_url_credentials(url: str) -> str:
    """Mask ``user:password@`` embedded in an API URL.

    Args:
        url: URL that may contain credentials.

    Returns:
        URL with credentials redacted.
    """
    return _URL_CREDENTIALS_PATTERN.sub(r"\1[REDACTED]:[REDACTED]@", url)
