"""Pydantic models for ActiveCampaign requests and responses."""

import os
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from activecampaign_sdk._internal.http import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT
from activecampaign_sdk.exceptions import ActiveCampaignConfigError

# =============================================================================
# Constants
# =============================================================================

DEFAULT_OUTPUT = "json"

_LEADING_INT = re.compile(r"\s*[+-]?\d+")

# Actions whose successful response is a plain string rather than a JSON object.
STRING_RESPONSE_ACTIONS: frozenset[str] = frozenset({
    "tags_list",
    "segment_list",
    "tracking_event_remove",
    "contact_list",
    "form_html",
    "tracking_site_status",
    "tracking_event_status",
    "tracking_whitelist",
    "tracking_log",
    "tracking_site_list",
    "tracking_event_list",
})

# =============================================================================
# Client Configuration
# =============================================================================


class ClientConfig(BaseModel):
    """Immutable connection settings for a single Connector.

    Required fields:
        url: Base endpoint with the credential query string already embedded,
            e.g. ``https://acct.api-us1.com/admin/api.php?api_key=...``

    Optional fields:
        output: Response format tag sent as ``api_output`` (default: "json")
        timeout: Read timeout in seconds (default: 30)
        connect_timeout: Connect timeout in seconds (default: 10)
        verify_tls: Verify TLS certificates and hostnames (default: False)
        headers: Extra headers sent with every request
        api_version: 1 for ``api.php`` style requests, 2 for key-appended URLs
        api_key: Key appended to version 2 URLs
        debug: Print debug output to stderr
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    output: str = DEFAULT_OUTPUT
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)
    verify_tls: bool = False
    headers: dict[str, str] = Field(default_factory=dict)
    api_version: Literal[1, 2] = 1
    api_key: str | None = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create a config from environment variables.

        Required environment variables:
            ACTIVECAMPAIGN_URL: Base URL with credentials embedded.

        Optional environment variables:
            ACTIVECAMPAIGN_API_KEY: Key for version 2 requests.
            ACTIVECAMPAIGN_API_VERSION: "1" or "2".
            ACTIVECAMPAIGN_TIMEOUT: Read timeout in seconds.
            ACTIVECAMPAIGN_CONNECT_TIMEOUT: Connect timeout in seconds.
            ACTIVECAMPAIGN_VERIFY_TLS: Set to "1" to verify TLS certificates.
            ACTIVECAMPAIGN_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ActiveCampaignConfigError: If ACTIVECAMPAIGN_URL is missing.
            ValueError: If a numeric variable is malformed.
        """
        url = os.environ.get("ACTIVECAMPAIGN_URL")
        if not url:
            raise ActiveCampaignConfigError("ACTIVECAMPAIGN_URL is not set")

        timeout = float(os.environ.get("ACTIVECAMPAIGN_TIMEOUT", str(DEFAULT_TIMEOUT)))
        connect_timeout = float(
            os.environ.get("ACTIVECAMPAIGN_CONNECT_TIMEOUT", str(DEFAULT_CONNECT_TIMEOUT))
        )
        api_version = int(os.environ.get("ACTIVECAMPAIGN_API_VERSION", "1"))

        return cls(
            url=url,
            timeout=timeout,
            connect_timeout=connect_timeout,
            api_version=api_version,  # type: ignore[arg-type]
            api_key=os.environ.get("ACTIVECAMPAIGN_API_KEY"),
            verify_tls=os.environ.get("ACTIVECAMPAIGN_VERIFY_TLS", "") == "1",
            debug=os.environ.get("ACTIVECAMPAIGN_DEBUG", "") == "1",
        )


# =============================================================================
# Normalized Result
# =============================================================================


class NormalizedResult(BaseModel):
    """Uniform result of a successful round trip.

    Every field of the remote JSON object is kept (``extra="allow"``) and is
    reachable as an attribute. ``success`` holds whichever of ``result_code``,
    ``succeeded`` or ``success`` the API returned; ``error`` is only set when
    that indicator is falsy.
    """

    model_config = ConfigDict(extra="allow")

    http_code: str
    success: Any = None
    error: Any = None

    @property
    def ok(self) -> bool:
        """Whether the success indicator is truthy."""
        return is_truthy(self.success)


def is_truthy(value: Any) -> bool:
    """Integer-coerced truthiness of a success indicator.

    Strings are read up to the end of their leading integer, so ``"1 ok"`` is
    truthy while ``"0"``, ``"0.9"``, ``""`` and non-numeric strings are falsy.
    ``False``, ``None`` and ``0`` are falsy as well.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        try:
            return int(value) != 0
        except (ValueError, OverflowError):
            return False
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return bool(match) and int(match.group(0)) != 0
    return bool(value)
