# The module is to define the configuration settings for the application.
# Date: 2026-10-17
# Version: 0.1.0

from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ultimarr.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    The Settings class holds the location and API key of every upstream service.
    It inherits from BaseSettings, which loads the values from the environment
    (and an optional .env file) and validates them once at startup.
    Attributes:
        JELLYSEERR_URL (str): Base URL of the Jellyseerr instance.
        JELLYSEERR_API_KEY (str): API key for Jellyseerr.
        SONARR_URL (str): Base URL of the Sonarr instance.
        SONARR_API_KEY (str): API key for Sonarr.
        RADARR_URL (str): Base URL of the Radarr instance.
        RADARR_API_KEY (str): API key for Radarr.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # JELLYSEERR
    JELLYSEERR_URL: str = "http://localhost:5055"
    JELLYSEERR_API_KEY: str

    # SONARR
    SONARR_URL: str = "http://localhost:8989"
    SONARR_API_KEY: str

    # RADARR
    RADARR_URL: str = "http://localhost:7878"
    RADARR_API_KEY: str

    @field_validator("JELLYSEERR_API_KEY", "SONARR_API_KEY", "RADARR_API_KEY")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("JELLYSEERR_URL", "SONARR_URL", "RADARR_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_settings(**overrides) -> Settings:
    """
    Builds the Settings instance, turning validation failures into a ConfigurationError
    that names every missing or invalid variable.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "settings"
            if error["type"] == "missing":
                problems.append(f"{field} is not set")
            else:
                problems.append(f"{field}: {error['msg']}")
        raise ConfigurationError(problems) from e


# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return load_settings()
