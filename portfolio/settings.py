"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from pathlib import Path
from typing import Annotated, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Portfolio API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Content locations (relative paths resolve against the working directory)
    blog_root: Path = Path("blog")
    projects_file: Path = Path("data/projects.json")
    admin_auth_file: Path = Path("config/blog-auth.json")
    contact_file: Path = Path("config/contact.json")

    # Admin key. Empty means "read adminApiKey from admin_auth_file".
    admin_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("ADMIN_API_KEY", "BLOG_ADMIN_API_KEY"),
    )

    # Blog
    old_archive_days: int = Field(default=365, ge=1)
    home_recent_posts: int = Field(default=3, ge=0, le=20)

    # CAPTCHA
    captcha_backend: Literal["memory", "redis"] = "memory"
    captcha_ttl_seconds: int = Field(default=300, ge=10, le=3600)
    captcha_difficulty: Literal["easy", "medium", "hard"] = "medium"

    # Redis (only used when captcha_backend == "redis")
    redis_url: str = "redis://localhost:6379/0"

    # CORS (JSON array or CSV; NoDecode leaves parsing to the validator)
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:3000"]'
        - Comma-separated string: "https://a.com,http://localhost:3000"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    # Fall back to comma split if env var isn't valid JSON.
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
