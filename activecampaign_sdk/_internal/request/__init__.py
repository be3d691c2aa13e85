"""Request engine for the ActiveCampaign Connector."""

from activecampaign_sdk._internal.request.encoding import encode_params, encode_query
from activecampaign_sdk._internal.request.engine import RequestEngine, resolve_action
from activecampaign_sdk._internal.request.models import (
    STRING_RESPONSE_ACTIONS,
    ClientConfig,
    NormalizedResult,
)

__all__ = [
    "RequestEngine",
    "resolve_action",
    "encode_params",
    "encode_query",
    "ClientConfig",
    "NormalizedResult",
    "STRING_RESPONSE_ACTIONS",
]
