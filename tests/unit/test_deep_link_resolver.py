"""
Tests for deep-link resolution.

Covers:
- Scheme and web-domain URL parsing
- Route matching order and segment rules
- Query and hash parameter merging
- OAuth callback detection and token extraction
- Navigation state and event log
"""

import pytest
from loguru import logger

from deeplink import (
    DEEP_LINK_ROUTES,
    DeepLinkResolver,
    DeepLinkRoute,
    build_deep_link,
    find_route,
    get_route_by_key,
    match_route_params,
    parse,
)
from deeplink.core.resolver import redact_url


class TestMatchRouteParams:
    """Pattern matching rules."""

    def test_binds_placeholder(self):
        """Test ':name' segment binds the path segment."""
        assert match_route_params("/release/42", "/release/:id") == {"id": "42"}

    def test_literal_route(self):
        """Test literal pattern matches with no params."""
        assert match_route_params("/wallet", "/wallet") == {}

    def test_segment_count_mismatch(self):
        """Test differing segment counts never match."""
        assert match_route_params("/release/42/edit", "/release/:id") is None
        assert match_route_params("/release", "/release/:id") is None

    def test_literal_mismatch(self):
        """Test differing literal segments never match."""
        assert match_route_params("/artist/7", "/release/:id") is None

    def test_empty_segments_ignored(self):
        """Test leading, trailing and doubled slashes are ignored."""
        assert match_route_params("//release/42/", "/release/:id") == {"id": "42"}


class TestFindRoute:
    """Ordered route lookup."""

    def test_first_match_wins(self):
        """Test the earlier of two matching routes is chosen."""
        routes = (
            DeepLinkRoute(
                key="first", pattern="/item/:id", screen="First", requires_auth=True
            ),
            DeepLinkRoute(
                key="second", pattern="/item/:slug", screen="Second", requires_auth=False
            ),
        )

        route, params = find_route("/item/9", routes)

        assert route.key == "first"
        assert params == {"id": "9"}

    def test_no_match(self):
        """Test unknown path returns None."""
        assert find_route("/nowhere") is None

    def test_promotions_list_before_detail(self):
        """Test literal list route and detail route do not shadow each other."""
        route, _ = find_route("/promotions")
        assert route.screen == "PromotionsList"

        route, params = find_route("/promotions/abc")
        assert route.screen == "PromotionDetail"
        assert params == {"id": "abc"}


class TestParseUrl:
    """URL parsing into navigation targets."""

    def test_scheme_release(self, resolver):
        """Test custom-scheme release link."""
        parsed = resolver.parse_url("murranno://release/42")

        assert parsed.screen == "ReleaseDetail"
        assert parsed.params == {"id": "42"}
        assert parsed.requires_auth is True
        assert parsed.navigator == "Main"
        assert parsed.is_oauth_callback is False
        assert parsed.original_url == "murranno://release/42"

    @pytest.mark.parametrize(
        "url",
        [
            "https://murranno.com/wallet",
            "https://www.murranno.com/wallet",
            "murranno://wallet",
        ],
    )
    def test_web_and_scheme_prefixes(self, resolver, url):
        """Test every accepted prefix resolves to the same screen."""
        parsed = resolver.parse_url(url)

        assert parsed.screen == "Wallet"

    def test_oauth_callback_hash(self, resolver):
        """Test callback tokens in the hash are kept as query params."""
        parsed = resolver.parse_url(
            "https://murranno.com/callback#access_token=abc&refresh_token=xyz"
        )

        assert parsed.screen == "Callback"
        assert parsed.requires_auth is False
        assert parsed.navigator == "Auth"
        assert parsed.is_oauth_callback is True
        assert parsed.query_params == {"access_token": "abc", "refresh_token": "xyz"}

    def test_query_and_hash_merged(self, resolver):
        """Test query and hash params are merged with hash winning."""
        parsed = resolver.parse_url(
            "murranno://reset-password?token=q1&lang=en#token=h1"
        )

        assert parsed.screen == "ResetPassword"
        assert parsed.query_params == {"token": "h1", "lang": "en"}

    def test_access_token_marks_callback(self, resolver):
        """Test any route carrying access_token is flagged as callback."""
        parsed = resolver.parse_url("murranno://login#access_token=abc")

        assert parsed.screen == "Login"
        assert parsed.is_oauth_callback is True

    def test_unmatched_returns_none(self, resolver):
        """Test path with too many segments resolves to nothing."""
        assert resolver.parse_url("murranno://release/42/edit") is None

    def test_empty_returns_none(self, resolver):
        """Test empty URL resolves to nothing."""
        assert resolver.parse_url("") is None

    def test_module_parse(self):
        """Test package-level parse uses the default table."""
        assert parse("murranno://campaign/c-1").screen == "CampaignTracking"


class TestOAuthTokens:
    """Token extraction from callback URLs."""

    def test_tokens_from_hash(self, resolver):
        """Test hash fragment tokens."""
        tokens = resolver.extract_oauth_tokens(
            "https://murranno.com/callback#access_token=abc&refresh_token=xyz"
            "&expires_in=3600&token_type=bearer"
        )

        assert tokens.access_token == "abc"
        assert tokens.refresh_token == "xyz"
        assert tokens.expires_in == 3600
        assert tokens.token_type == "bearer"

    def test_query_fallback(self, resolver):
        """Test query string is used when the hash has no access token."""
        tokens = resolver.extract_oauth_tokens(
            "murranno://callback?access_token=q-abc&refresh_token=q-xyz#state=1"
        )

        assert tokens.access_token == "q-abc"
        assert tokens.refresh_token == "q-xyz"

    def test_no_tokens(self, resolver):
        """Test URL without tokens yields empty token set."""
        tokens = resolver.extract_oauth_tokens("murranno://callback")

        assert tokens.access_token is None
        assert tokens.refresh_token is None
        assert tokens.expires_in is None

    def test_bad_expires_in(self, resolver):
        """Test non-numeric expires_in is dropped."""
        tokens = resolver.extract_oauth_tokens(
            "murranno://callback#access_token=abc&expires_in=soon"
        )

        assert tokens.access_token == "abc"
        assert tokens.expires_in is None


class TestUrlChecks:
    """Prefix and callback predicates."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("murranno://wallet", True),
            ("https://murranno.com/wallet", True),
            ("https://www.murranno.com/wallet", True),
            ("https://example.com/wallet", False),
            ("", False),
            (None, False),
        ],
    )
    def test_is_valid_deep_link(self, resolver, url, expected):
        """Test app and web prefixes are accepted."""
        assert resolver.is_valid_deep_link(url) is expected

    def test_is_oauth_callback_url(self, resolver):
        """Test callback path plus token or code is required."""
        assert resolver.is_oauth_callback_url(
            "https://murranno.com/callback#access_token=abc"
        )
        assert resolver.is_oauth_callback_url("murranno://callback?code=xyz")
        assert not resolver.is_oauth_callback_url("murranno://callback")
        assert not resolver.is_oauth_callback_url("murranno://login?code=xyz")


class TestNavigation:
    """Screen lookup and navigation state."""

    def test_get_route_for_screen(self, resolver):
        """Test lookup by screen name."""
        assert resolver.get_route_for_screen("Wallet").pattern == "/wallet"
        assert resolver.get_route_for_screen("Missing") is None

    def test_build_navigation_state(self, resolver):
        """Test nested state carries navigator, screen and merged params."""
        parsed = resolver.parse_url("murranno://release/42?tab=stats")

        state = resolver.build_navigation_state(parsed)

        assert state == {
            "routes": [
                {
                    "name": "Main",
                    "state": {
                        "routes": [
                            {
                                "name": "ReleaseDetail",
                                "params": {"id": "42", "tab": "stats"},
                            }
                        ]
                    },
                }
            ]
        }

    def test_admin_navigator(self, resolver):
        """Test admin route uses its own navigator."""
        state = resolver.build_navigation_state(resolver.parse_url("murranno://admin"))

        assert state["routes"][0]["name"] == "Admin"


class TestEventLog:
    """Bounded debug event log."""

    def test_events_recorded(self, resolver):
        """Test parse attempts are logged."""
        resolver.parse_url("murranno://wallet")

        events = [entry["event"] for entry in resolver.get_event_log()]
        assert events == ["Parsing URL", "Route matched"]

    def test_log_is_bounded(self, resolver):
        """Test only the most recent 100 events are kept."""
        for i in range(80):
            resolver.parse_url(f"murranno://release/{i}")

        log = resolver.get_event_log()

        assert len(log) == 100
        assert log[-1]["data"]["params"] == {"id": "79"}

    def test_tokens_never_logged(self, resolver):
        """Test OAuth token values reach neither loguru nor the event log."""
        url = (
            "https://murranno.com/callback?code=CODE123"
            "#access_token=SECRETTOKEN&refresh_token=REFRESH456&expires_in=3600"
        )
        records = []
        sink_id = logger.add(records.append, level="DEBUG")
        try:
            parsed = resolver.parse_url(url)
            tokens = resolver.extract_oauth_tokens(url)
        finally:
            logger.remove(sink_id)

        assert tokens.access_token == "SECRETTOKEN"
        assert parsed.original_url == url
        logged = "".join(str(record) for record in records)
        stored = repr(resolver.get_event_log())
        for secret in ("SECRETTOKEN", "REFRESH456", "CODE123"):
            assert secret not in logged
            assert secret not in stored
        assert "access_token=***" in stored

    def test_redact_url(self):
        """Test only credential values are masked."""
        assert redact_url(
            "murranno://reset-password?token=abc&lang=en#state=1"
        ) == "murranno://reset-password?token=***&lang=en#state=1"
        assert redact_url("murranno://release/42") == "murranno://release/42"

    def test_clear(self, resolver):
        """Test clearing the log."""
        resolver.parse_url("murranno://wallet")
        resolver.clear_event_log()

        assert resolver.get_event_log() == []


class TestBuildDeepLink:
    """Link construction."""

    def test_scheme_link(self):
        """Test custom-scheme link with params."""
        assert build_deep_link("release", {"id": "42"}) == "murranno:///release/42"

    def test_https_link(self):
        """Test universal link."""
        assert build_deep_link("wallet", use_https=True) == "https://murranno.com/wallet"

    def test_values_are_quoted(self):
        """Test param values are URL-quoted."""
        assert build_deep_link("artist", {"id": "a b/c"}) == "murranno:///artist/a%20b%2Fc"

    def test_built_link_resolves(self, resolver):
        """Test a built link resolves back to its route."""
        parsed = resolver.parse_url(build_deep_link("promotionDetail", {"id": "p9"}))

        assert parsed.screen == "PromotionDetail"
        assert parsed.params == {"id": "p9"}

    def test_unknown_key(self):
        """Test unknown route key raises KeyError."""
        with pytest.raises(KeyError):
            build_deep_link("nope")

    def test_route_keys_unique(self):
        """Test route table keys are unique."""
        keys = [route.key for route in DEEP_LINK_ROUTES]

        assert len(keys) == len(set(keys))
        assert get_route_by_key("callback").screen == "Callback"
