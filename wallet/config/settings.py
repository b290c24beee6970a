"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wallet.config.business_constants import DEFAULT_WITHDRAWAL_DESCRIPTION


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase
    supabase_url: str
    supabase_anon_key: str
    supabase_access_token: str | None = None

    # HTTP client
    # None keeps aiohttp's own default timeout
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Total timeout for edge function calls (seconds)"
    )

    # Withdrawals
    forward_pin_on_initiate: bool = Field(
        default=True,
        description=(
            "Send the verified PIN with the initiate-withdrawal payload "
            "so the edge function can re-verify it"
        )
    )
    withdrawal_description: str = DEFAULT_WITHDRAWAL_DESCRIPTION

    # Application
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = "logs/wallet.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('supabase_url')
    @classmethod
    def validate_supabase_url(cls, v: str) -> str:
        """Validate Supabase project URL."""
        if not v.startswith(('https://', 'http://')):
            raise ValueError(
                'SUPABASE_URL must start with https:// or http://'
            )
        return v.rstrip('/')

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level name."""
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f'Invalid LOG_LEVEL: {v}')
        return level

    @model_validator(mode='after')
    def validate_production(self) -> 'Settings':
        """Validate production-specific requirements."""
        if self.environment == 'production':
            # DEBUG must be False in production
            if self.debug:
                raise ValueError(
                    'DEBUG must be False in production environment. '
                    'Set DEBUG=false in your .env file.'
                )

            if not self.supabase_url.startswith('https://'):
                raise ValueError(
                    'SUPABASE_URL must use https:// in production.'
                )

            if not self.forward_pin_on_initiate:
                logger.warning(
                    'FORWARD_PIN_ON_INITIATE is disabled. '
                    'The edge function will rely on the earlier '
                    'verify-transaction-pin call only.'
                )

        return self

    @property
    def functions_base_url(self) -> str:
        """Base URL of the Supabase Edge Functions endpoint."""
        return f"{self.supabase_url}/functions/v1"


# Global settings instance
settings = Settings()
