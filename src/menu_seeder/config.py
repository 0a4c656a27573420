"""Configuration management for Menu Seeder."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppwriteSettings(BaseSettings):
    """Appwrite REST API client settings."""

    endpoint: str = Field(
        default="https://cloud.appwrite.io/v1",
        description="Appwrite API endpoint, including the /v1 suffix"
    )
    project_id: str = Field(default="", description="Appwrite project ID")
    api_key: str = Field(default="", description="Server API key with databases and storage scopes")
    timeout_seconds: float = Field(default=30, description="Request timeout")
    page_size: int = Field(default=100, description="Documents/files fetched per listing page")


class CollectionSettings(BaseSettings):
    """Identifiers of the database, collections and bucket being seeded."""

    database_id: str = Field(default="", description="Appwrite database ID")
    categories_collection_id: str = Field(default="categories")
    customizations_collection_id: str = Field(default="customizations")
    menu_collection_id: str = Field(default="menu")
    menu_customizations_collection_id: str = Field(default="menu_customizations")
    bucket_id: str = Field(default="assets", description="Storage bucket for menu images")


class SeedSettings(BaseSettings):
    """Seed run settings."""

    placeholder_image_url: str = Field(
        default="https://via.placeholder.com/150",
        description="Image URL used when a source image cannot be materialized"
    )
    data_path: str | None = Field(
        default=None,
        description="Path to a seed dataset JSON file (bundled dataset when unset)"
    )
    image_timeout_seconds: float = Field(default=30, description="Source image fetch timeout")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Log level")

    # Appwrite
    appwrite: AppwriteSettings = Field(default_factory=AppwriteSettings)
    collections: CollectionSettings = Field(default_factory=CollectionSettings)

    # Seeding
    seed: SeedSettings = Field(default_factory=SeedSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


# Global settings instance
settings = Settings()
