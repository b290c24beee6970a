"""
Route matching and link building.

Pure helpers with no logging or state.
"""

from collections.abc import Iterable
from urllib.parse import quote

from deeplink.constants import (
    DEEP_LINK_ROUTES,
    URL_SCHEME,
    WEB_DOMAIN,
    get_route_by_key,
)
from deeplink.core.models import DeepLinkRoute


def match_route_params(path: str, pattern: str) -> dict[str, str] | None:
    """
    Match a path against a route pattern.

    Segment counts must be equal; literal segments must be equal;
    a ':name' segment binds name to the path segment.

    Args:
        path: URL path (e.g. '/release/42')
        pattern: Route pattern (e.g. '/release/:id')

    Returns:
        Bound parameters, or None if the path does not match

    Example:
        >>> match_route_params("/release/42", "/release/:id")
        {'id': '42'}
        >>> match_route_params("/release/42/edit", "/release/:id") is None
        True
    """
    pattern_parts = [part for part in pattern.split("/") if part]
    path_parts = [part for part in path.split("/") if part]

    if len(pattern_parts) != len(path_parts):
        return None

    params: dict[str, str] = {}
    for pattern_part, path_part in zip(pattern_parts, path_parts):
        if pattern_part.startswith(":"):
            params[pattern_part[1:]] = path_part
        elif pattern_part != path_part:
            return None

    return params


def find_route(
    path: str, routes: Iterable[DeepLinkRoute] = DEEP_LINK_ROUTES
) -> tuple[DeepLinkRoute, dict[str, str]] | None:
    """
    Find the first route matching path.

    Args:
        path: URL path
        routes: Ordered route table

    Returns:
        Tuple of (route, params) or None
    """
    for route in routes:
        params = match_route_params(path, route.pattern)
        if params is not None:
            return route, params
    return None


def build_deep_link(
    route_key: str,
    params: dict[str, str] | None = None,
    use_https: bool = False,
) -> str:
    """
    Build a deep-link URL for a route.

    Args:
        route_key: Route key (e.g. 'release')
        params: Values for ':name' placeholders
        use_https: Build a universal link instead of a custom-scheme link

    Returns:
        URL string

    Raises:
        KeyError: If route_key is unknown

    Example:
        >>> build_deep_link("release", {"id": "42"})
        'murranno:///release/42'
    """
    route = get_route_by_key(route_key)

    path = route.pattern
    for key, value in (params or {}).items():
        path = path.replace(f":{key}", quote(str(value), safe=""))

    base_url = f"https://{WEB_DOMAIN}" if use_https else f"{URL_SCHEME}://"
    return f"{base_url}{path}"
