"""
Deep-link constants.

URL scheme, web domain and the ordered route table. The table is a
tuple because match order decides which route wins.
"""

from deeplink.core.models import DeepLinkRoute


# Custom URL scheme
URL_SCHEME = "murranno"

# Web domain for Universal Links / App Links
WEB_DOMAIN = "murranno.com"

# URL prefixes stripped before matching
URL_PREFIXES = (
    f"{URL_SCHEME}://",
    f"https://{WEB_DOMAIN}",
    f"https://www.{WEB_DOMAIN}",
)

# OAuth callback path and the parameter that marks token delivery
CALLBACK_PATH = "/callback"
ACCESS_TOKEN_PARAM = "access_token"

# Event log size
EVENT_LOG_LIMIT = 100

# Navigators
AUTH_NAVIGATOR = "Auth"
MAIN_NAVIGATOR = "Main"
ADMIN_NAVIGATOR = "Admin"


def _route(
    key: str,
    pattern: str,
    screen: str,
    requires_auth: bool,
    navigator: str,
    params: tuple[str, ...] = (),
) -> DeepLinkRoute:
    return DeepLinkRoute(
        key=key,
        pattern=pattern,
        screen=screen,
        requires_auth=requires_auth,
        navigator=navigator,
        params=params,
    )


DEEP_LINK_ROUTES: tuple[DeepLinkRoute, ...] = (
    # Auth routes (no auth required)
    _route("welcome", "/welcome", "Welcome", False, AUTH_NAVIGATOR),
    _route("login", "/login", "Login", False, AUTH_NAVIGATOR),
    _route("signup", "/signup", "Signup", False, AUTH_NAVIGATOR),
    _route(
        "resetPassword", "/reset-password", "ResetPassword", False,
        AUTH_NAVIGATOR, ("token",),
    ),
    _route(
        "verifyEmail", "/verify-email", "VerifyEmail", False,
        AUTH_NAVIGATOR, ("token",),
    ),
    _route("callback", CALLBACK_PATH, "Callback", False, AUTH_NAVIGATOR),

    # Main app routes (auth required)
    _route("dashboard", "/dashboard", "ArtistDashboard", True, MAIN_NAVIGATOR),
    _route(
        "release", "/release/:id", "ReleaseDetail", True,
        MAIN_NAVIGATOR, ("id",),
    ),
    _route("releases", "/releases", "ReleasesList", True, MAIN_NAVIGATOR),
    _route(
        "artist", "/artist/:id", "ArtistProfile", True,
        MAIN_NAVIGATOR, ("id",),
    ),
    _route(
        "campaign", "/campaign/:id", "CampaignTracking", True,
        MAIN_NAVIGATOR, ("id",),
    ),
    _route("campaigns", "/campaigns", "CampaignsList", True, MAIN_NAVIGATOR),
    _route("upload", "/upload", "Upload", True, MAIN_NAVIGATOR),
    _route("earnings", "/earnings", "EarningsOverview", True, MAIN_NAVIGATOR),
    _route("wallet", "/wallet", "Wallet", True, MAIN_NAVIGATOR),
    _route("analytics", "/analytics", "Analytics", True, MAIN_NAVIGATOR),
    _route("promotions", "/promotions", "PromotionsList", True, MAIN_NAVIGATOR),
    _route(
        "promotionDetail", "/promotions/:id", "PromotionDetail", True,
        MAIN_NAVIGATOR, ("id",),
    ),
    _route("profile", "/profile", "ProfileOverview", True, MAIN_NAVIGATOR),
    _route("settings", "/settings", "Settings", True, MAIN_NAVIGATOR),
    _route(
        "notifications", "/notifications", "Notifications", True,
        MAIN_NAVIGATOR,
    ),
    _route(
        "subscription", "/subscription", "SubscriptionPlans", True,
        MAIN_NAVIGATOR,
    ),

    # Label routes
    _route(
        "labelDashboard", "/label/dashboard", "LabelDashboard", True,
        MAIN_NAVIGATOR,
    ),
    _route(
        "labelArtists", "/label/artists", "ArtistRoster", True,
        MAIN_NAVIGATOR,
    ),

    # Agency routes
    _route(
        "agencyDashboard", "/agency/dashboard", "AgencyDashboard", True,
        MAIN_NAVIGATOR,
    ),
    _route(
        "agencyClients", "/agency/clients", "Clients", True, MAIN_NAVIGATOR,
    ),

    # Admin routes
    _route("admin", "/admin", "AdminDashboard", True, ADMIN_NAVIGATOR),
)


def get_route_by_key(key: str) -> DeepLinkRoute:
    """
    Get route by its key.

    Args:
        key: Route key (e.g. 'release')

    Returns:
        Matching route

    Raises:
        KeyError: If no route has this key
    """
    for route in DEEP_LINK_ROUTES:
        if route.key == key:
            return route
    raise KeyError(f"Unknown route: {key}")
