from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseSettings):
    """Connection settings for an OpenAI-compatible endpoint.

    Settings can be provided via environment variables with OLLAMA_ prefix
    (OLLAMA_HOST, OLLAMA_MODEL, ...) or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="OLLAMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Base URL of the chat-completion API, including the /v1 suffix
    host: str = "http://localhost:11434/v1"
    model: str = "qwen2.5:latest"

    # Ollama ignores the key but the client requires one
    api_key: str = "ollama"

    # Seconds to wait for the endpoint before giving up
    timeout: float = Field(default=120.0, gt=0)
