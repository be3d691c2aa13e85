"""User-facing client for the ActiveCampaign v1 API."""

import sys
from typing import Any
from urllib.parse import quote_plus

import httpx
from pydantic import ValidationError

from activecampaign_sdk._internal.dispatch import Dispatcher
from activecampaign_sdk._internal.request import ClientConfig, NormalizedResult, RequestEngine
from activecampaign_sdk.exceptions import (
    ActiveCampaignConfigError,
    ActiveCampaignError,
    ActiveCampaignValidationError,
)

CAPABILITIES: tuple[str, ...] = (
    "api",
    "credentials_test",
    "get_timeout",
    "set_timeout",
    "get_connect_timeout",
    "set_connect_timeout",
    "contact_add",
    "contact_edit",
    "contact_view",
    "contact_list",
    "contact_delete",
    "list_",
    "list_add",
    "tags_list",
    "form_html",
    "tracking_event_remove",
)


class Connector:
    """Client for the form-encoded ActiveCampaign API.

    Calls are routed by name through ``call``::

        connector = Connector(url="https://acct.api-us1.com/admin/api.php?api_key=KEY")
        connector.call("contact_view", 42)
        connector.call("list_", "all")

    Each call performs exactly one HTTP round trip. Nothing is retried, and
    timeout setters must not be used while another thread has a request in
    flight on the same Connector.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        url: str | None = None,
        transport: httpx.BaseTransport | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the connector.

        Args:
            config: Complete configuration. Mutually exclusive with ``url``.
            url: Base URL with credentials embedded; builds a ClientConfig
                together with ``overrides``.
            transport: Optional httpx transport override.
            **overrides: Further ClientConfig fields (timeout, debug, ...).

        Raises:
            ActiveCampaignConfigError: If neither or both of config/url are given.
            ActiveCampaignValidationError: If the configuration is invalid.
        """
        if (config is None) == (url is None):
            raise ActiveCampaignConfigError("Pass exactly one of config or url")
        if config is None:
            config = self._validate_config({"url": url, **overrides})

        self._config = config
        self._engine = RequestEngine(lambda: self._config, transport=transport)
        self._dispatcher = Dispatcher(self, CAPABILITIES)

    @classmethod
    def from_env(cls, *, transport: httpx.BaseTransport | None = None) -> "Connector":
        """Create a connector from environment variables.

        See ``ClientConfig.from_env`` for the variables read.
        """
        return cls(ClientConfig.from_env(), transport=transport)

    @property
    def config(self) -> ClientConfig:
        """The current configuration."""
        return self._config

    @property
    def capabilities(self) -> list[str]:
        """Identifiers accepted by ``call``."""
        return self._dispatcher.capabilities

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[activecampaign-sdk] {message}", file=sys.stderr)

    @staticmethod
    def _validate_config(values: dict[str, Any]) -> ClientConfig:
        try:
            return ClientConfig.model_validate(values)
        except ValidationError as e:
            raise ActiveCampaignValidationError(str(e)) from e

    def _update_config(self, **changes: Any) -> None:
        self._config = self._validate_config({**self._config.model_dump(), **changes})

    # =========================================================================
    # Dispatch and Request Entry Points
    # =========================================================================

    def call(self, name: str, *args: Any) -> Any:
        """Route a call by name, e.g. ``call("contact_list", "1,2")``.

        Raises:
            MissingMethodError: If ``name`` resolves to no capability.
        """
        return self._dispatcher.dispatch(name, *args)

    def request(
        self,
        url: str,
        params: Any = None,
        verb: str | None = None,
        action: str | None = None,
    ) -> NormalizedResult | str:
        """Send one request through the request engine."""
        return self._engine.request(url, params, verb, action)

    def action_url(self, action: str, **query: Any) -> str:
        """Build the URL of a v1 action, appending extra query parameters."""
        url = f"{self._config.url}&api_action={action}&api_output={self._config.output}"
        for key, value in query.items():
            url += f"&{key}={quote_plus(str(value), safe=',')}"
        return url

    # =========================================================================
    # Connection Settings
    # =========================================================================

    def credentials_test(self) -> bool:
        """Check that the configured credentials are accepted.

        Returns:
            True if the ``user_me`` call succeeded, False on any SDK error.
        """
        try:
            self.request(self.action_url("user_me"))
        except ActiveCampaignError as e:
            self._log_debug(f"Credentials test failed: {e}")
            return False
        return True

    def get_timeout(self) -> float:
        """Read timeout in seconds."""
        return self._config.timeout

    def set_timeout(self, seconds: float) -> None:
        """Set the read timeout used by subsequent requests."""
        self._update_config(timeout=seconds)

    def get_connect_timeout(self) -> float:
        """Connect timeout in seconds."""
        return self._config.connect_timeout

    def set_connect_timeout(self, seconds: float) -> None:
        """Set the connect timeout used by subsequent requests."""
        self._update_config(connect_timeout=seconds)

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def api(
        self,
        action: str,
        params: Any = None,
        verb: str | None = None,
    ) -> NormalizedResult | str:
        """Call any v1 action, e.g. ``api("campaign_list", {"ids": "all"}, "GET")``."""
        return self.request(self.action_url(action), params, verb, action)

    def contact_add(self, params: dict[str, Any]) -> NormalizedResult | str:
        """Create a contact (``contact_add``)."""
        return self.api("contact_add", params)

    def contact_edit(self, params: dict[str, Any]) -> NormalizedResult | str:
        """Update a contact (``contact_edit``)."""
        return self.api("contact_edit", params)

    def contact_view(self, contact_id: int | str) -> NormalizedResult | str:
        """Fetch one contact by ID (``contact_view``)."""
        return self.request(self.action_url("contact_view", id=contact_id), action="contact_view")

    def contact_list(self, ids: str = "all", full: bool = False) -> NormalizedResult | str:
        """List contacts by comma-separated IDs (``contact_list``)."""
        url = self.action_url("contact_list", ids=ids, full=int(full))
        return self.request(url, action="contact_list")

    def contact_delete(self, contact_id: int | str) -> NormalizedResult | str:
        """Delete one contact by ID (``contact_delete``)."""
        return self.request(self.action_url("contact_delete", id=contact_id), action="contact_delete")

    def list_(self, ids: str = "all") -> NormalizedResult | str:
        """List mailing lists by comma-separated IDs (``list_list``)."""
        return self.request(self.action_url("list_list", ids=ids), action="list_list")

    def list_add(self, params: dict[str, Any]) -> NormalizedResult | str:
        """Create a mailing list (``list_add``)."""
        return self.api("list_add", params)

    def tags_list(self) -> NormalizedResult | str:
        """List all tags (``tags_list``); the API answers with a plain string."""
        return self.api("tags_list")

    def form_html(self, form_id: int | str) -> NormalizedResult | str:
        """Render a subscription form as HTML (``form_html``)."""
        return self.request(self.action_url("form_html", id=form_id), action="form_html")

    def tracking_event_remove(self, event: str) -> NormalizedResult | str:
        """Remove a tracked event type (``tracking_event_remove``)."""
        return self.api("tracking_event_remove", {"event": event}, "DELETE")
