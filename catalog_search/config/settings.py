"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Catalog Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Search Configuration
    fuzzy_threshold: float = Field(default=0.6)
    max_results: int = Field(default=10)
    min_score: float = Field(default=0.1)
    max_query_length: int = Field(default=100)
    max_suggestion_distance: int = Field(default=2)
    early_truncation: bool = Field(default=True)
    
    # Session context
    history_size: int = Field(default=50)
    result_cache_size: int = Field(default=100)
    max_sessions: int = Field(default=1000)
    default_session_id: str = Field(default="default")
    
    # Optional catalog to load at startup (JSON list of items)
    catalog_path: str = Field(default="")
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
