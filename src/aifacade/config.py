"""Client configuration and env handling."""
from pydantic_settings import BaseSettings, SettingsConfigDict

COMPLETIONS_PATH = "/v1/completions"
CHAT_PATH = "/v1/chat/completions"
IMAGES_PATH = "/v1/images/generations"


class BaseAppSettings(BaseSettings):
    """Base settings with common env config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class ClientSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="AIFACADE_")

    api_key: str = ""
    base_url: str = "https://api.openai.com"
    timeout_seconds: float = 60.0
    max_attempts: int = 1
    json_logs: bool = False
