"""Application settings and configuration."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Ollama Configuration
    ollama_url: str = Field(
        default="http://localhost:11434/api/generate",
        description="Ollama generate endpoint",
        validation_alias="OLLAMA_URL",
    )

    model_name: str = Field(
        default="mistral:7b",
        description="Model to use (Ollama model tag)",
        validation_alias="MODEL_NAME",
    )

    # Generation Settings
    temperature: float = Field(
        default=0.2,  # low so the model sticks to the requested JSON shape
        ge=0.0,
        le=1.0,
        description="Sampling temperature for question generation",
        validation_alias="TEMPERATURE",
    )

    top_p: float = Field(
        default=0.9,
        ge=0.0,
        le=1.0,
        description="Nucleus sampling cutoff",
        validation_alias="TOP_P",
    )

    num_predict: int = Field(
        default=1500,
        ge=1,
        description="Maximum number of tokens the model may generate",
        validation_alias="NUM_PREDICT",
    )

    ollama_timeout: float | None = Field(
        default=None,
        gt=0.0,
        description="Seconds to wait for Ollama (unset waits indefinitely)",
        validation_alias="OLLAMA_TIMEOUT",
    )

    max_questions: int = Field(
        default=50,
        ge=1,
        description="Largest quiz the endpoint will build",
        validation_alias="MAX_QUESTIONS",
    )

    # Server Settings
    api_host: str = Field(
        default="127.0.0.1",
        description="Host the API server binds to",
        validation_alias="API_HOST",
    )

    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the API server listens on",
        validation_alias="API_PORT",
    )

    api_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL the quiz client talks to",
        validation_alias="API_URL",
    )

    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
        validation_alias="CORS_ORIGINS",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "protected_namespaces": ("settings_",),
    }


# This is loaded the first time and then cached for further use by the app and CLI
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
