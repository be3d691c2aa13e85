"""Public models for the ActiveCampaign SDK."""

from activecampaign_sdk._internal.request.models import ClientConfig, NormalizedResult

__all__ = ["ClientConfig", "NormalizedResult"]
