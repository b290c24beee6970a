"""
Murranno deep-link resolver.

Standalone package for parsing app and universal links.

Example:
    >>> from deeplink import parse
    >>>
    >>> link = parse("murranno://release/42")
    >>> link.screen, link.params
    ('ReleaseDetail', {'id': '42'})
"""

from deeplink.core.models import DeepLinkRoute, OAuthTokens, ParsedDeepLink
from deeplink.constants import (
    DEEP_LINK_ROUTES,
    URL_SCHEME,
    WEB_DOMAIN,
    get_route_by_key,
)
from deeplink.core.routing import build_deep_link, find_route, match_route_params
from deeplink.core.resolver import DeepLinkResolver


default_resolver = DeepLinkResolver()


def parse(url: str) -> ParsedDeepLink | None:
    """Parse url with the default route table."""
    return default_resolver.parse_url(url)


__version__ = "1.0.0"
__all__ = [
    # Core
    "DeepLinkResolver",
    "parse",
    "default_resolver",
    # Models
    "DeepLinkRoute",
    "ParsedDeepLink",
    "OAuthTokens",
    # Routing
    "DEEP_LINK_ROUTES",
    "URL_SCHEME",
    "WEB_DOMAIN",
    "build_deep_link",
    "find_route",
    "get_route_by_key",
    "match_route_params",
]
