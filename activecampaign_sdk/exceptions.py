"""Public exceptions for the ActiveCampaign SDK."""


class ActiveCampaignError(Exception):
    """Base exception for all ActiveCampaign SDK errors."""


class MissingMethodError(ActiveCampaignError):
    """Dispatched call name does not resolve to a capability of the client."""

    def __init__(self, method_name: str, class_name: str) -> None:
        super().__init__(f"The method {method_name} does not exist on the class {class_name}")
        self.method_name = method_name
        self.class_name = class_name


class RequestError(ActiveCampaignError):
    """Transport failure or a response body the API client cannot interpret."""

    def __init__(self, failed_message: str) -> None:
        super().__init__(failed_message)
        self.failed_message = failed_message


class RequestTimeoutError(ActiveCampaignError):
    """Connect or read timeout exceeded."""


class ActiveCampaignAPIError(ActiveCampaignError):
    """HTTP-level error returned by the ActiveCampaign API."""

    def __init__(self, body: str, status_code: str | None = None) -> None:
        super().__init__(body)
        self.body = body
        self.status_code = status_code


class ClientError(ActiveCampaignAPIError):
    """HTTP 4xx response."""


class ServerError(ActiveCampaignAPIError):
    """HTTP 5xx response."""


class ActiveCampaignConfigError(ActiveCampaignError):
    """Configuration error (missing env vars, invalid config)."""


class ActiveCampaignValidationError(ActiveCampaignError):
    """Validation error for configuration values."""
