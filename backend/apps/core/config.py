"""
Configuration module using Pydantic Settings.
"""

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class ScorerConfig(BaseModel):
    base_neutral: float = 0.1
    keyword_weight: float = 0.3
    jitter: float = 0.2


class HistoryConfig(BaseModel):
    default_limit: int = 10
    max_limit: int = 100


class IdentityHeaders(BaseModel):
    user_id: str = "X-User-Id"
    email: str = "X-User-Email"
    first_name: str = "X-User-First-Name"
    last_name: str = "X-User-Last-Name"
    profile_image_url: str = "X-User-Profile-Image"


class Settings(BaseSettings):
    """Application-wide settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Core Settings
    APP_NAME: str = "Mood Lens API"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./mood_lens.db"
    DATABASE_ECHO: bool = False

    # Analysis
    # Optional per-request cap enforced by the API, off by default
    MAX_TEXT_CHARS: int | None = None
    WEEKLY_WINDOW_DAYS: int = 7
    FALLBACK_EMOTION: str = "neutral"

    # Sub-configs
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    identity: IdentityHeaders = Field(default_factory=IdentityHeaders)


settings = Settings()
