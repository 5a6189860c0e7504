"""Tests for query/form encoding."""

import pytest

from trello_sdk._internal.http_client.encoding import build_query
from trello_sdk.exceptions import TrelloValidationError


class TestBuildQuery:
    """Tests for build_query()."""

    def test_flat_mapping(self):
        assert build_query({"fields": "name", "filter": "open"}) == "fields=name&filter=open"

    def test_quotes_reserved_characters(self):
        """Should use + for spaces and percent-encode the rest."""
        assert build_query({"name": "To do & done", "desc": "a/b"}) == (
            "name=To+do+%26+done&desc=a%2Fb"
        )

    def test_booleans_and_numbers(self):
        assert build_query({"closed": False, "pos": 3, "subscribed": True}) == (
            "closed=0&pos=3&subscribed=1"
        )

    def test_none_values_are_skipped(self):
        assert build_query({"name": "x", "desc": None}) == "name=x"

    def test_nested_mapping_uses_brackets(self):
        assert build_query({"prefs": {"background": "blue"}}) == "prefs%5Bbackground%5D=blue"

    def test_sequence_uses_indexes(self):
        assert build_query({"idLabels": ["a", "b"]}) == "idLabels%5B0%5D=a&idLabels%5B1%5D=b"

    def test_raw_string_passes_through(self):
        assert build_query("fields=name&lists=open") == "fields=name&lists=open"

    def test_bytes_are_decoded(self):
        assert build_query(b"fields=name") == "fields=name"

    def test_non_utf8_bytes_raise(self):
        with pytest.raises(TrelloValidationError):
            build_query(b"\xff\xfe")

    def test_empty_mapping(self):
        assert build_query({}) == ""

    def test_unicode_is_utf8_encoded(self):
        assert build_query({"name": "café"}) == "name=caf%C3%A9"
