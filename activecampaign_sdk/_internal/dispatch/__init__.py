"""Call-name routing for the ActiveCampaign Connector.

WARNING: This is a system-level module used by Connector.
Do not call directly from user code.
"""

from activecampaign_sdk._internal.dispatch.dispatcher import Dispatcher, normalize_method_name

__all__ = [
    "Dispatcher",
    "normalize_method_name",
]
