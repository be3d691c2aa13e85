"""ActiveCampaign SDK for Python.

This SDK provides a client for the form-encoded ActiveCampaign v1 API.

Public API:
    Connector - User-facing client
    ClientConfig - Connection settings
    NormalizedResult - Uniform result of a successful call

Internal (system-level, not for direct use):
    _internal.dispatch - Call-name routing
    _internal.request - Request engine
"""

from activecampaign_sdk._version import __version__
from activecampaign_sdk.client import Connector
from activecampaign_sdk.exceptions import (
    ActiveCampaignAPIError,
    ActiveCampaignConfigError,
    ActiveCampaignError,
    ActiveCampaignValidationError,
    ClientError,
    MissingMethodError,
    RequestError,
    RequestTimeoutError,
    ServerError,
)
from activecampaign_sdk.models import ClientConfig, NormalizedResult

__all__ = [
    "__version__",
    "Connector",
    "ClientConfig",
    "NormalizedResult",
    "ActiveCampaignError",
    "ActiveCampaignAPIError",
    "ActiveCampaignConfigError",
    "ActiveCampaignValidationError",
    "ClientError",
    "MissingMethodError",
    "RequestError",
    "RequestTimeoutError",
    "ServerError",
]
