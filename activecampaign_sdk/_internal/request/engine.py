"""Request construction, execution and response normalization."""

import json
import re
import sys
from collections.abc import Callable
from typing import Any

import httpx

from activecampaign_sdk._internal.http import create_http_client
from activecampaign_sdk._internal.request.encoding import encode_params, encode_query
from activecampaign_sdk._internal.request.models import (
    STRING_RESPONSE_ACTIONS,
    ClientConfig,
    NormalizedResult,
    is_truthy,
)
from activecampaign_sdk._internal.request.redaction import redact_url
from activecampaign_sdk.exceptions import (
    ClientError,
    RequestError,
    RequestTimeoutError,
    ServerError,
)

BODY_VERBS = frozenset({"POST", "PUT", "DELETE"})
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_API_ACTION = re.compile(r"api_action=([^&]*)", re.IGNORECASE)


class RequestEngine:
    """Builds, sends and normalizes one ActiveCampaign request per call.

    The engine reads its configuration through ``config_provider`` on every
    request, so timeouts changed on the owning Connector take effect on the
    next call. Nothing is retried: every failure is raised to the caller.
    """

    def __init__(
        self,
        config_provider: Callable[[], ClientConfig],
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the request engine.

        Args:
            config_provider: Returns the current ClientConfig.
            transport: Optional httpx transport override.
        """
        self._config_provider = config_provider
        self._transport = transport

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config_provider().debug:
            print(f"[activecampaign-sdk] {message}", file=sys.stderr)

    def request(
        self,
        url: str,
        params: Any = None,
        verb: str | None = None,
        action: str | None = None,
    ) -> NormalizedResult | str:
        """Send a request and normalize its response.

        Args:
            url: Target URL, credentials included.
            params: Optional parameter structure (see encoding module).
            verb: Optional HTTP verb hint. Ignored when there are no params.
            action: Action name hint, used when the URL has no api_action.

        Returns:
            A NormalizedResult, or the raw body for string-returning actions.

        Raises:
            RequestTimeoutError: Connect or read timeout exceeded.
            RequestError: Transport failure or uninterpretable body.
            ClientError: HTTP 4xx.
            ServerError: HTTP 5xx.
        """
        config = self._config_provider()
        verb = verb.upper() if verb else None

        if config.api_version == 2:
            action_name = action
            url = f"{url}?api_key={config.api_key or ''}"
        else:
            action_name = resolve_action(url, action)

        method, url, body = build_request(url, params, verb)
        headers: dict[str, str] = {}
        if body is not None:
            headers["Content-Type"] = FORM_CONTENT_TYPE

        self._log_debug(f"{method} {redact_url(url)} (action={action_name})")
        response = self._send(config, method, url, body, headers)

        status = str(response.status_code)
        raw_body = response.text
        if status[:1] in ("4", "5"):
            self._log_debug(f"HTTP {status} for {action_name}")
        raise_for_status(status, raw_body)

        result = normalize_response(raw_body, status, action_name)
        if isinstance(result, str):
            self._log_debug(f"Plain string response for {action_name}")
        return result

    def _send(
        self,
        config: ClientConfig,
        method: str,
        url: str,
        body: str | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        """Execute the request, mapping transport failures to SDK errors."""
        try:
            with create_http_client(
                timeout=config.timeout,
                connect_timeout=config.connect_timeout,
                verify=config.verify_tls,
                headers=config.headers,
                transport=self._transport,
            ) as client:
                return client.request(method, url, content=body, headers=headers)
        except httpx.TimeoutException as e:
            self._log_debug(f"Request timed out: {e}")
            raise RequestTimeoutError(str(e)) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._log_debug(f"Request failed: {e}")
            raise RequestError(str(e)) from e


def resolve_action(url: str, hint: str | None = None) -> str | None:
    """Return the api_action query value of a URL, falling back to ``hint``."""
    match = _API_ACTION.search(url)
    if match:
        return match.group(1)
    return hint


def build_request(url: str, params: Any, verb: str | None) -> tuple[str, str, str | None]:
    """Resolve the verb, final URL and form body for a request.

    Returns:
        (method, url, body) where body is None for requests without one.
    """
    if params and verb == "GET":
        separator = "&" if "?" in url else "?"
        return "GET", f"{url}{separator}{encode_query(params)}", None

    if not params:
        verb = "GET"
    elif not verb:
        verb = "POST"

    if verb not in BODY_VERBS:
        if verb == "GET":
            return "GET", url, None
        verb = "POST"

    return verb, url, encode_params(params)


def raise_for_status(status: str, body: str) -> None:
    """Raise ClientError for 4xx and ServerError for 5xx status codes."""
    if status.startswith("4"):
        raise ClientError(body, status)
    if status.startswith("5"):
        raise ServerError(body, status)


def normalize_response(body: str, status: str, action: str | None) -> NormalizedResult | str:
    """Reconcile the API's success signals into a NormalizedResult.

    ``result_code`` takes precedence over ``succeeded``; an object carrying
    only ``success`` is returned as-is. Bodies that are not such an object are
    returned verbatim for string-returning actions and rejected otherwise.
    """
    try:
        data = json.loads(body)
    except ValueError:
        data = None

    if not isinstance(data, dict) or not any(
        data.get(key) is not None for key in ("result_code", "succeeded", "success")
    ):
        if action in STRING_RESPONSE_ACTIONS:
            return body
        raise RequestError(body)

    if data.get("result_code") is not None:
        data["success"] = data["result_code"]
        if not is_truthy(data["result_code"]):
            data["error"] = data.get("result_message")
    elif data.get("succeeded") is not None:
        data["success"] = data["succeeded"]
        if not is_truthy(data["succeeded"]):
            data["error"] = data.get("message")

    data["http_code"] = status
    return NormalizedResult.model_validate(data)
