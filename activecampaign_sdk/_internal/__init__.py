"""Internal modules for ActiveCampaign SDK.

WARNING: This package contains system-level modules used by Connector.
These are not intended for direct use in application code.

Modules:
    dispatch - Call-name routing
    request - Request construction, execution and normalization
    http - Shared HTTP client configuration
"""
