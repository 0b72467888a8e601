from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.hateoas import DEFAULT_RELATED_FALLBACK, LinkTemplates


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Application settings managed by Pydantic.
    Reads from environment variables and/or .env file.
    Dict-valued settings are given as JSON in the environment.
    """
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Rendering
    DEFAULT_FORMAT: str = "hal"
    JSONAPI_VERSION: str = "1.1"

    # Link templates
    BASE_URL: str = ""
    RESOURCE_PATHS: dict[str, str] = {}     # {"order": "/orders/{id}"}
    RELATED_PATHS: dict[str, str] = {}      # {"order.items": "/orders/{id}/items"}
    COLLECTION_PATHS: dict[str, str] = {}   # {"order": "/orders"}
    RELATED_FALLBACK: Optional[str] = DEFAULT_RELATED_FALLBACK

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )


def build_link_templates(config: Settings) -> LinkTemplates:
    return LinkTemplates(
        base_url=config.BASE_URL,
        resource_paths=config.RESOURCE_PATHS,
        related_paths=config.RELATED_PATHS,
        collection_paths=config.COLLECTION_PATHS,
        related_fallback=config.RELATED_FALLBACK,
    )


settings = Settings()
