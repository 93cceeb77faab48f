"""Unit tests for OAuth route helpers."""

from urllib.parse import parse_qs, urlsplit

from flowdeck.interface.api.routes.oauth import _redirect_target, with_query


class TestWithQuery:
    def test_appends_to_bare_url(self):
        url = with_query("http://localhost:4200/cb", {"userId": "7"})

        assert url == "http://localhost:4200/cb?userId=7"

    def test_keeps_existing_query(self):
        url = with_query("https://app.example.com/cb?tab=home", {"created": "true"})

        query = parse_qs(urlsplit(url).query)
        assert query == {"tab": ["home"], "created": ["true"]}

    def test_encodes_values(self):
        url = with_query("https://app.example.com/cb", {"fullName": "Ada Lovelace & co"})

        assert parse_qs(urlsplit(url).query)["fullName"] == ["Ada Lovelace & co"]


class TestRedirectTarget:
    def test_explicit_redirect_wins(self):
        assert _redirect_target("https://a/x", "https://b/y") == "https://a/x"

    def test_blank_redirect_falls_back_to_default(self):
        assert _redirect_target("  ", "https://b/y") == "https://b/y"

    def test_no_target_at_all(self):
        assert _redirect_target(None, "") is None
