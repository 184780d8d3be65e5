"""
Chat-completion endpoint configuration settings.

Dependencies: pydantic, pydantic_settings
System role: LLM endpoint configuration for retrieval-augmented queries
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompletionSettings(BaseSettings):
    """OpenAI-compatible chat-completion endpoint configuration."""

    model_config = SettingsConfigDict(
        env_prefix="COMPLETION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the completion service (POST {base_url}/v1/chat/completions)",
    )
    model: str = Field(default="llama", description="Chat model name")
    api_key: str = Field(default="", description="Optional bearer token")
    timeout_seconds: float = Field(default=120.0, gt=0, description="HTTP timeout in seconds")
