"""Pydantic models for deep-link routing."""

from pydantic import BaseModel, ConfigDict, Field


class DeepLinkRoute(BaseModel):
    """Model for a deep-link route table entry.

    Route order in the table is significant: the first match wins.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Route identifier (e.g. 'release')")
    pattern: str = Field(..., description="Path template, e.g. /release/:id")
    screen: str = Field(..., description="Destination screen name")
    requires_auth: bool = Field(..., description="Whether login is required")
    params: tuple[str, ...] = Field(
        default=(), description="Declared parameter names"
    )
    navigator: str | None = Field(default=None, description="Navigator name")

    @property
    def segments(self) -> list[str]:
        """Non-empty pattern segments."""
        return [part for part in self.pattern.split("/") if part]


class ParsedDeepLink(BaseModel):
    """Navigation target resolved from a URL."""

    model_config = ConfigDict(frozen=True)

    screen: str
    params: dict[str, str] = Field(default_factory=dict)
    requires_auth: bool
    navigator: str | None = None
    query_params: dict[str, str] = Field(default_factory=dict)
    original_url: str
    is_oauth_callback: bool = False


class OAuthTokens(BaseModel):
    """OAuth tokens delivered through a callback URL."""

    access_token: str | None = None
    refresh_token: str | None = None
    expires_in: int | None = None
    token_type: str | None = None
