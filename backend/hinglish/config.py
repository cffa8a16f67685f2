"""Application configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Hinglish Translator"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS - browser extension and local dev origins
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Authentication (optional - set API_AUTH_TOKEN to require a token)
    api_auth_token: Optional[str] = None

    # Translation provider
    translation_provider: str = "http"  # "http" | "litellm"
    translation_api_url: str = "https://api.groq.ai/translate"
    translation_api_key: Optional[str] = None
    translation_timeout: float = 10.0  # seconds
    max_retries: int = 0  # transport retries inside the gateway only

    # LiteLLM provider (used when translation_provider == "litellm")
    litellm_model: str = "groq/llama-3.1-8b-instant"

    # Language pair sent with every request
    source_lang: str = "en"
    target_lang: str = "hi-Latn"
    formality: str = "neutral"
    target_language_name: str = "Hinglish"  # used in prompt templates

    # Localized messages
    locale: str = "en"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
