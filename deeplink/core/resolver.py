"""
Deep-link resolver.

Turns raw URLs from OS launch events or in-app navigation into
structured navigation targets, and pulls OAuth tokens out of
callback URLs.
"""

import re
from collections import deque
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any
from urllib.parse import parse_qsl

from loguru import logger

from deeplink.constants import (
    ACCESS_TOKEN_PARAM,
    CALLBACK_PATH,
    DEEP_LINK_ROUTES,
    EVENT_LOG_LIMIT,
    MAIN_NAVIGATOR,
    URL_PREFIXES,
    URL_SCHEME,
    WEB_DOMAIN,
)
from deeplink.core.models import DeepLinkRoute, OAuthTokens, ParsedDeepLink
from deeplink.core.routing import find_route


# Query/hash parameters whose values never reach the logs
SENSITIVE_PARAM_RE = re.compile(
    r"(?<=[?#&])(access_token|refresh_token|provider_token|token|code)=[^&#]*"
)


def redact_url(url: str) -> str:
    """
    Mask credential values in a URL before it is logged.

    Example:
        >>> redact_url("murranno://callback#access_token=abc&state=1")
        'murranno://callback#access_token=***&state=1'
    """
    return SENSITIVE_PARAM_RE.sub(r"\1=***", url)


def _parse_params(raw: str) -> dict[str, str]:
    """Parse a form-urlencoded string into a flat dict (last key wins)."""
    return dict(parse_qsl(raw, keep_blank_values=True))


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class DeepLinkResolver:
    """
    Resolver for deep-link URLs.

    Holds an ordered route table and a bounded event log of recent
    parse attempts for debugging.
    """

    def __init__(
        self, routes: Iterable[DeepLinkRoute] = DEEP_LINK_ROUTES
    ) -> None:
        """
        Initialize resolver.

        Args:
            routes: Ordered route table (first match wins)
        """
        self.routes: tuple[DeepLinkRoute, ...] = tuple(routes)
        self._events: deque[dict[str, Any]] = deque(maxlen=EVENT_LOG_LIMIT)

    def _log_event(self, event: str, data: dict[str, Any] | None = None) -> None:
        self._events.append(
            {
                "timestamp": datetime.now(UTC).isoformat(),
                "event": event,
                "data": data,
            }
        )
        logger.debug(f"[DeepLinkResolver] {event} {data or ''}")

    def get_event_log(self) -> list[dict[str, Any]]:
        """Return a copy of recent events (oldest first)."""
        return list(self._events)

    def clear_event_log(self) -> None:
        """Drop all recorded events."""
        self._events.clear()

    @staticmethod
    def normalize_url(url: str) -> str:
        """
        Strip the app scheme or web domain prefix from url.

        Args:
            url: Raw URL

        Returns:
            Path-like string, possibly with query and hash
        """
        scheme_prefix = f"{URL_SCHEME}://"
        if url.startswith(scheme_prefix):
            return "/" + url[len(scheme_prefix):]
        for prefix in (f"https://www.{WEB_DOMAIN}", f"https://{WEB_DOMAIN}"):
            if url.startswith(prefix):
                return url[len(prefix):]
        return url

    def parse_url(self, url: str) -> ParsedDeepLink | None:
        """
        Parse a deep-link URL into a navigation target.

        Query and hash parameters are merged into one map (hash wins on
        key collisions) so OAuth tokens in the fragment are kept.

        Args:
            url: Raw URL

        Returns:
            ParsedDeepLink, or None if no route matches
        """
        self._log_event("Parsing URL", {"url": redact_url(url)})

        if not url:
            self._log_event("Empty URL")
            return None

        path = self.normalize_url(url)

        # Hash fragment first (OAuth tokens)
        path, _, hash_string = path.partition("#")
        path, _, query_string = path.partition("?")

        query_params: dict[str, str] = {}
        if query_string:
            query_params.update(_parse_params(query_string))
        if hash_string:
            query_params.update(_parse_params(hash_string))

        is_oauth_callback = (
            path == CALLBACK_PATH or ACCESS_TOKEN_PARAM in query_params
        )

        match = find_route(path, self.routes)
        if match is None:
            self._log_event("No route matched", {"path": path})
            return None

        route, params = match
        self._log_event("Route matched", {"route": route.key, "params": params})
        return ParsedDeepLink(
            screen=route.screen,
            params=params,
            requires_auth=route.requires_auth,
            navigator=route.navigator,
            query_params=query_params,
            original_url=url,
            is_oauth_callback=is_oauth_callback,
        )

    def extract_oauth_tokens(self, url: str) -> OAuthTokens:
        """
        Extract OAuth tokens from a callback URL.

        The hash fragment is checked first; the query string is used
        as a fallback when the fragment has no access token.

        Args:
            url: Callback URL

        Returns:
            OAuthTokens (fields None when absent)
        """
        self._log_event("Extracting OAuth tokens", {"url": redact_url(url)})

        tokens = OAuthTokens()

        _, has_hash, fragment = url.partition("#")
        if has_hash:
            tokens = self._tokens_from(_parse_params(fragment))

        if not tokens.access_token:
            _, has_query, query = url.partition("?")
            if has_query:
                tokens = self._tokens_from(
                    _parse_params(query.split("#", 1)[0])
                )

        self._log_event(
            "Tokens extracted",
            {
                "has_access": bool(tokens.access_token),
                "has_refresh": bool(tokens.refresh_token),
            },
        )
        return tokens

    @staticmethod
    def _tokens_from(params: dict[str, str]) -> OAuthTokens:
        return OAuthTokens(
            access_token=params.get("access_token"),
            refresh_token=params.get("refresh_token"),
            expires_in=_parse_int(params.get("expires_in")),
            token_type=params.get("token_type") or None,
        )

    @staticmethod
    def is_valid_deep_link(url: str | None) -> bool:
        """Check if url belongs to this app (scheme or web domain)."""
        if not url:
            return False
        return url.startswith(URL_PREFIXES)

    @staticmethod
    def is_oauth_callback_url(url: str) -> bool:
        """Check if url looks like an OAuth callback carrying a token or code."""
        return CALLBACK_PATH in url and (
            ACCESS_TOKEN_PARAM in url or "code=" in url
        )

    def get_route_for_screen(self, screen: str) -> DeepLinkRoute | None:
        """
        Get the first route pointing at screen.

        Args:
            screen: Screen name

        Returns:
            Route or None
        """
        for route in self.routes:
            if route.screen == screen:
                return route
        return None

    @staticmethod
    def build_navigation_state(parsed: ParsedDeepLink) -> dict[str, Any]:
        """
        Build a nested navigation state for the routing collaborator.

        Args:
            parsed: Parsed deep link

        Returns:
            Navigation state dict
        """
        return {
            "routes": [
                {
                    "name": parsed.navigator or MAIN_NAVIGATOR,
                    "state": {
                        "routes": [
                            {
                                "name": parsed.screen,
                                "params": {
                                    **parsed.params,
                                    **parsed.query_params,
                                },
                            }
                        ]
                    },
                }
            ]
        }
