"""Configuration and settings for DocChat.

Uses Pydantic Settings for fail-fast validation on startup.
A missing completion API key surfaces as ConfigurationError before any
request reaches the upstream API.
"""

import logging
import sys
from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("fitz").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Raises ValidationError if required variables are missing; use
    load_settings() to get a ConfigurationError instead.
    """

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # API Keys (required)
    groq_api_key: str = Field(
        ...,
        validation_alias=AliasChoices("groq_api_key", "vite_groq_api_key"),
        description="Bearer credential for the chat-completion API",
    )

    # Completion API
    completion_api_url: str = Field(
        default="https://api.groq.com/openai/v1/chat/completions",
        description="OpenAI-compatible chat-completion endpoint",
    )
    llm_model: str = Field(
        default="llama-3.3-70b-versatile", description="Model used for replies"
    )
    document_temperature: float = Field(
        default=0.2, description="Temperature for document-grounded answers"
    )
    chat_temperature: float = Field(
        default=0.7, description="Temperature for general conversation"
    )
    llm_max_tokens: int = Field(default=3000, description="Max tokens for generation")
    llm_timeout: float | None = Field(
        default=None,
        description="Client-side request timeout in seconds (None disables it)",
    )

    # Prompt Assembly
    document_char_limit: int = Field(
        default=12000, description="Max characters of each document sent upstream"
    )
    document_history_window: int = Field(
        default=4, description="Prior messages sent alongside document context"
    )
    chat_history_window: int = Field(
        default=6, description="Prior messages sent in plain chat mode"
    )

    # Document Processing
    min_content_chars: int = Field(
        default=10, description="Minimum extracted characters for a usable document"
    )

    # Session
    greeting: str = Field(
        default="Where should we begin! ✨",
        description="Assistant message that opens every conversation",
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("groq_api_key")
    @classmethod
    def validate_api_key_not_empty(cls, v: str, info) -> str:
        """Ensure API keys are not empty strings."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v.strip()


def load_settings(**overrides: Any) -> Settings:
    """Build settings, translating validation failures into ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(
            str(err["loc"][-1]) if err.get("loc") else "settings"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid or missing configuration: {fields}. "
            "Set GROQ_API_KEY in the environment or .env file."
        ) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return load_settings()


# CORS Configuration
CORS_CONFIG: dict[str, Any] = {
    "allow_origins": [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    "allow_credentials": True,
    "allow_methods": ["GET", "POST", "DELETE", "OPTIONS"],
    "allow_headers": ["*"],
    "expose_headers": ["*"],
    "max_age": 600,
}

# FastAPI App Configuration
APP_CONFIG: dict[str, Any] = {
    "title": "DocChat",
    "description": (
        "Chat with a hosted language model, optionally grounded in "
        "uploaded PDF, Word and text documents."
    ),
    "version": "0.1.0",
    "docs_url": "/api/docs",
    "redoc_url": "/api/redoc",
    "openapi_url": "/api/openapi.json",
    "openapi_tags": [
        {
            "name": "Health",
            "description": "Health check and service status",
        },
        {
            "name": "Documents",
            "description": "Document upload and management",
        },
        {
            "name": "Chat",
            "description": "Conversation with optional document context",
        },
    ],
}


def get_app_config() -> dict[str, Any]:
    """Get FastAPI application configuration."""
    return APP_CONFIG.copy()


def get_cors_config() -> dict[str, Any]:
    """Get CORS middleware configuration."""
    return CORS_CONFIG.copy()
