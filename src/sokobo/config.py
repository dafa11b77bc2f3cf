"""Runtime settings, read from ``SOKOBO_*`` environment variables or ``.env``."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Sokobo API"
    environment: str = "development"
    log_dir: str = "logs"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Sessions
    jwt_secret: str = "dev-secret-change"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    # Demo data
    seed_demo_data: bool = True
    admin_name: str = "Admin User"
    admin_email: str = "admin@sokobo.co.za"
    admin_password: str = "sokobo-admin"

    model_config = SettingsConfigDict(env_prefix="SOKOBO_", env_file=".env", extra="ignore")

    def public_view(self) -> dict:
        """Settings with secrets masked, for display."""
        data = self.model_dump()
        for key in ("jwt_secret", "admin_password"):
            data[key] = "********"
        return data


@lru_cache
def get_settings() -> Settings:
    return Settings()
