"""Tests for public exceptions."""

import pytest

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


class TestActiveCampaignError:
    """Tests for base ActiveCampaignError."""

    def test_is_exception(self):
        """ActiveCampaignError should be an Exception."""
        assert issubclass(ActiveCampaignError, Exception)

    @pytest.mark.parametrize(
        "error_cls",
        [
            MissingMethodError,
            RequestError,
            RequestTimeoutError,
            ActiveCampaignAPIError,
            ClientError,
            ServerError,
            ActiveCampaignConfigError,
            ActiveCampaignValidationError,
        ],
    )
    def test_all_errors_inherit_from_base(self, error_cls):
        """Every SDK error should be catchable as ActiveCampaignError."""
        assert issubclass(error_cls, ActiveCampaignError)


class TestMissingMethodError:
    """Tests for MissingMethodError."""

    def test_message_and_attributes(self):
        """Should name the method and the class."""
        error = MissingMethodError("campaign_send", "Connector")
        assert str(error) == "The method campaign_send does not exist on the class Connector"
        assert error.method_name == "campaign_send"
        assert error.class_name == "Connector"


class TestRequestErrors:
    """Tests for RequestError and RequestTimeoutError."""

    def test_request_error_failed_message(self):
        """Should store the failed message."""
        error = RequestError("<html>maintenance</html>")
        assert str(error) == "<html>maintenance</html>"
        assert error.failed_message == "<html>maintenance</html>"

    def test_timeout_is_not_request_error(self):
        """Timeouts should be distinguishable from generic request errors."""
        assert not issubclass(RequestTimeoutError, RequestError)
        assert not issubclass(RequestError, RequestTimeoutError)


class TestActiveCampaignAPIError:
    """Tests for HTTP-level errors."""

    def test_with_body_only(self):
        """Should create error with body only."""
        error = ActiveCampaignAPIError("failed")
        assert str(error) == "failed"
        assert error.body == "failed"
        assert error.status_code is None

    def test_client_error(self):
        """Should store body and status code."""
        error = ClientError('{"error": "forbidden"}', "403")
        assert error.body == '{"error": "forbidden"}'
        assert error.status_code == "403"
        assert isinstance(error, ActiveCampaignAPIError)

    def test_server_error_caught_as_api_error(self):
        """Should be catchable as ActiveCampaignAPIError."""
        with pytest.raises(ActiveCampaignAPIError):
            raise ServerError("oops", "500")

    def test_client_and_server_distinct(self):
        """ClientError and ServerError should not be related."""
        assert not issubclass(ClientError, ServerError)
        assert not issubclass(ServerError, ClientError)


class TestConfigAndValidationErrors:
    """Tests for configuration errors."""

    def test_config_error_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(ActiveCampaignConfigError) as exc_info:
            raise ActiveCampaignConfigError("Missing URL")
        assert str(exc_info.value) == "Missing URL"

    def test_validation_error_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(ActiveCampaignValidationError) as exc_info:
            raise ActiveCampaignValidationError("timeout must be positive")
        assert str(exc_info.value) == "timeout must be positive"
