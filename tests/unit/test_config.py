"""Unit tests for configuration management."""

import os
from unittest.mock import patch

from menu_seeder.config import Settings


def test_settings_default_values(tmp_path, monkeypatch):
    """Test that Settings loads with default values."""
    # Keep a developer's .env out of the way
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings()

    assert settings.debug is False
    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.appwrite.endpoint == "https://cloud.appwrite.io/v1"
    assert settings.appwrite.timeout_seconds == 30
    assert settings.appwrite.page_size == 100
    assert settings.collections.categories_collection_id == "categories"
    assert settings.collections.customizations_collection_id == "customizations"
    assert settings.collections.menu_collection_id == "menu"
    assert settings.collections.menu_customizations_collection_id == "menu_customizations"
    assert settings.collections.bucket_id == "assets"
    assert settings.seed.placeholder_image_url == "https://via.placeholder.com/150"
    assert settings.seed.data_path is None


def test_settings_from_environment(tmp_path, monkeypatch):
    """Test that Settings can be overridden by environment variables."""
    monkeypatch.chdir(tmp_path)
    env_vars = {
        "ENVIRONMENT": "production",
        "LOG_LEVEL": "DEBUG",
        "APPWRITE__ENDPOINT": "https://appwrite.example.com/v1",
        "APPWRITE__PROJECT_ID": "food-app",
        "APPWRITE__API_KEY": "secret",
        "APPWRITE__PAGE_SIZE": "50",
        "COLLECTIONS__DATABASE_ID": "main",
        "COLLECTIONS__MENU_COLLECTION_ID": "menu_items",
        "COLLECTIONS__BUCKET_ID": "images",
        "SEED__PLACEHOLDER_IMAGE_URL": "https://cdn.example.com/placeholder.png",
    }

    with patch.dict(os.environ, env_vars, clear=True):
        settings = Settings()

    assert settings.environment == "production"
    assert settings.log_level == "DEBUG"
    assert settings.appwrite.endpoint == "https://appwrite.example.com/v1"
    assert settings.appwrite.project_id == "food-app"
    assert settings.appwrite.api_key == "secret"
    assert settings.appwrite.page_size == 50
    assert settings.collections.database_id == "main"
    assert settings.collections.menu_collection_id == "menu_items"
    assert settings.collections.categories_collection_id == "categories"
    assert settings.collections.bucket_id == "images"
    assert settings.seed.placeholder_image_url == "https://cdn.example.com/placeholder.png"


def test_settings_from_env_file(tmp_path, monkeypatch):
    """Test that a .env file in the working directory is read."""
    (tmp_path / ".env").write_text(
        "APPWRITE__PROJECT_ID=from-dotenv\nCOLLECTIONS__DATABASE_ID=dotenv-db\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    with patch.dict(os.environ, {}, clear=True):
        settings = Settings()

    assert settings.appwrite.project_id == "from-dotenv"
    assert settings.collections.database_id == "dotenv-db"
