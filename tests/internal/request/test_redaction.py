"""Tests for credential masking in URLs."""

from activecampaign_sdk._internal.request.redaction import REDACTED_VALUE, redact_url


class TestRedactUrl:
    """Tests for redact_url()."""

    def test_api_key_masked(self):
        """Should mask api_key values."""
        url = "https://a.example.com/admin/api.php?api_key=secret&api_action=user_me"
        assert redact_url(url) == (
            f"https://a.example.com/admin/api.php?api_key={REDACTED_VALUE}&api_action=user_me"
        )

    def test_user_and_pass_masked(self):
        """Should mask api_user and api_pass values."""
        url = "https://a.example.com/admin/api.php?api_user=bob&api_pass=abc123"
        redacted = redact_url(url)
        assert "bob" not in redacted
        assert "abc123" not in redacted
        assert redacted.count(REDACTED_VALUE) == 2

    def test_case_insensitive_keys(self):
        """Should match credential keys regardless of case."""
        assert "secret" not in redact_url("https://a.example.com/?API_KEY=secret")

    def test_other_params_untouched(self):
        """Should leave other parameters alone."""
        url = "https://a.example.com/admin/api.php?api_action=contact_list&ids=1,2"
        assert redact_url(url) == url

    def test_url_without_query(self):
        """Should return URLs without a query unchanged."""
        assert redact_url("https://a.example.com/") == "https://a.example.com/"
