from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="Notemark API",
        description="Application name",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the notemark logger",
    )
    allowed_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        description="Comma-separated origins allowed by CORS",
    )
    metadata_fetch_timeout: float = Field(
        default=10.0,
        description="Seconds to wait when fetching a bookmark page for metadata",
    )
    metadata_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent sent when fetching bookmark pages",
    )

    model_config = SettingsConfigDict(
        env_prefix="NOTEMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
