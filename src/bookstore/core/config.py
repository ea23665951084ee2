"""
Configuration module for the bookstore backend.

This module defines the Settings class, which loads environment variables
and provides application-wide configuration: database URL, environment,
logging level and the HTTP bind address.

Usage:
    Call `get_settings()` to obtain the cached Settings instance, or build a
    `Settings(...)` explicitly and hand it to `create_app`.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL (str): Database connection string.
        ENVIRONMENT (str): Current environment (e.g., 'production', 'development').
        LOG_LEVEL (str): Root logging level name.
        SQL_ECHO (bool): Whether SQLAlchemy echoes emitted SQL.
        HOST (str): Interface the HTTP server binds to.
        PORT (int): Port the HTTP server listens on.
    """
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bookstore.db")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SQL_ECHO: bool = False
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache
def get_settings() -> Settings:
    """Returns the process-wide Settings, built on first use."""
    return Settings()
