"""Tests for redaction of credentials in debug output."""

from trello_sdk._internal.http_client.redaction import REDACTED_VALUE, redact_mapping, redact_query


class TestRedactMapping:
    """Tests for redact_mapping()."""

    def test_redacts_authorization_header(self):
        headers = {"Authorization": 'OAuth oauth_consumer_key="k", oauth_token="t"'}
        assert redact_mapping(headers) == {"Authorization": REDACTED_VALUE}

    def test_case_insensitive(self):
        result = redact_mapping({"AUTHORIZATION": "x", "Cookie": "y", "Accept": "z"})
        assert result == {"AUTHORIZATION": REDACTED_VALUE, "Cookie": REDACTED_VALUE, "Accept": "z"}

    def test_nested_mapping(self):
        result = redact_mapping({"options": {"token": "secret", "timeout": 10}})
        assert result == {"options": {"token": REDACTED_VALUE, "timeout": 10}}

    def test_original_not_mutated(self):
        original = {"Authorization": "secret", "nested": {"key": "k"}}
        redact_mapping(original)
        assert original == {"Authorization": "secret", "nested": {"key": "k"}}

    def test_non_string_keys(self):
        assert redact_mapping({1: "one"}) == {1: "one"}


class TestRedactQuery:
    """Tests for redact_query()."""

    def test_redacts_credential_pairs(self):
        assert redact_query("1/members/me?key=k&token=t&fields=id") == (
            "1/members/me?key=[REDACTED]&token=[REDACTED]&fields=id"
        )

    def test_case_insensitive_and_bracketed_keys(self):
        assert redact_query("1/x?TOKEN=t&token%5B0%5D=u") == (
            "1/x?TOKEN=[REDACTED]&token%5B0%5D=[REDACTED]"
        )

    def test_url_inside_message(self):
        message = "Client error '401' for url 'https://api.trello.com/1/boards?token=t'"
        assert redact_query(message) == (
            "Client error '401' for url 'https://api.trello.com/1/boards?token=[REDACTED]'"
        )

    def test_path_without_query_unchanged(self):
        assert redact_query("1/boards/abc123") == "1/boards/abc123"

    def test_other_params_unchanged(self):
        assert redact_query("1/search?query=key+things") == "1/search?query=key+things"
