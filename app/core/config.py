"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env file."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application
    app_name: str = "Open Conference"
    debug: bool = False
    log_dir: str = "~/.logs/openconference"

    # Server
    host: str = "0.0.0.0"  # Bind to all interfaces for external access
    port: int = 8000
    allowed_origins: str = "*"  # Comma-separated origins, or "*" for all

    # Database
    database_url: str = "sqlite:///./openconference.db"

    # Identity
    # Header set by the authenticating proxy once the identity provider
    # has verified the caller. Its value is the provider's subject id.
    identity_header: str = "X-Verified-Subject"

    # Enables test-support endpoints such as deleting a test user
    is_test: bool = False


settings = Settings()
