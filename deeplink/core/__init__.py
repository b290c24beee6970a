"""
Core deep-link functionality.

Route and result models. The resolver and routing helpers live in
deeplink.core.resolver and deeplink.core.routing.
"""

from deeplink.core.models import DeepLinkRoute, OAuthTokens, ParsedDeepLink

__all__ = [
    "DeepLinkRoute",
    "OAuthTokens",
    "ParsedDeepLink",
]
