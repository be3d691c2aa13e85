"""Masking of credentials embedded in request URLs."""

import re

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "api_user",
    "api_pass",
})

REDACTED_VALUE = "[REDACTED]"

_QUERY_PARAM = re.compile(r"([?&])([^=&#]+)=([^&#]*)")


def redact_url(url: str) -> str:
    """Replace credential query values in a URL with "[REDACTED]".

    Args:
        url: The request URL.

    Returns:
        The URL with the values of api_key, api_user and api_pass masked.
    """

    def _mask(match: re.Match[str]) -> str:
        sep, key, value = match.groups()
        if key.lower() in REDACT_KEYS:
            return f"{sep}{key}={REDACTED_VALUE}"
        return match.group(0)

    return _QUERY_PARAM.sub(_mask, url)
