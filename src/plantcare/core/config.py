from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Plant Care Tracker"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/plants.sqlite"
    database_echo: bool = False
    run_migrations_on_startup: bool = True

    # Scheduling
    care_timezone: str = "UTC"  # IANA zone used for calendar-day arithmetic

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Server / client
    host: str = "127.0.0.1"
    port: int = 4000
    api_url: str = "http://localhost:4000"

    @field_validator("care_timezone")
    @classmethod
    def validate_care_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone '{v}'") from e
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.care_timezone)


@lru_cache
def get_settings() -> Settings:
    return Settings()
