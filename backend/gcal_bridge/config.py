"""
Application Configuration
All settings loaded from environment variables (and an optional .env file).
"""
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Google OAuth (server-side config for the authorization-code flow)
    google_client_id: Optional[str] = None
    google_client_secret: Optional[str] = None
    google_redirect_uri: str = Field(
        default="http://localhost:3000/auth/google/callback",
        validation_alias=AliasChoices("GOOGLE_REDIRECT_URI", "REDIRECT_URI"),
    )
    google_client_secrets_file: str = "client_secret.json"
    google_scopes: List[str] = [
        "https://www.googleapis.com/auth/calendar.readonly",
        "https://www.googleapis.com/auth/calendar.events",
    ]

    # Calendar behaviour
    event_timezone: str = "America/Los_Angeles"
    freebusy_window_days: int = 7

    # Action-service binding
    action_service_path: str = "/odata/v4/calendar"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
