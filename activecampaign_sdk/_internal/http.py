"""Shared HTTP client configuration."""

import httpx

from activecampaign_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    verify: bool = False,
    headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    TLS verification is off unless requested; many ActiveCampaign installs
    still serve self-signed or legacy certificates.

    Args:
        timeout: Read timeout in seconds.
        connect_timeout: Connect timeout in seconds.
        verify: Verify TLS certificates and hostnames.
        headers: Extra headers sent with every request.
        transport: Optional transport override.

    Returns:
        Configured httpx.Client instance.
    """
    client_headers = {"User-Agent": f"activecampaign-sdk/{__version__}"}
    client_headers.update(headers or {})
    return httpx.Client(
        timeout=httpx.Timeout(timeout, connect=connect_timeout),
        verify=verify,
        headers=client_headers,
        transport=transport,
    )
