"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Glossary Manager")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Search Configuration
    fuzzy_enabled: bool = Field(default=True)
    fuzzy_tolerance: int = Field(default=2)
    max_query_length: int = Field(default=100)
    suggestion_limit: int = Field(default=8)
    include_corrections: bool = Field(default=True)

    # Storage
    store_path: str = Field(default="glossar.json")
    persist_changes: bool = Field(default=True)

    # OneDrive via Microsoft Graph
    graph_base_url: str = Field(default="https://graph.microsoft.com/v1.0")
    graph_file_path: str = Field(default="/me/drive/root:/Glossar/glossar.json")
    graph_folder_name: str = Field(default="Glossar")
    graph_access_token: Optional[str] = Field(default=None)
    graph_timeout: float = Field(default=30.0)

    # Logging
    log_level: str = Field(default="INFO")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]
    )

    model_config = SettingsConfigDict(
        env_prefix="GLOSSARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
