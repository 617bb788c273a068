from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):

    # OpenAI Configuration
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 60.0  # Seconds, enforced by the OpenAI client

    # High temperature favours creative variation between variants
    generation_temperature: float = 0.9

    # Logging Configuration
    log_level: str = "info"
    log_dir: Optional[str] = None  # Console only when unset
    log_backup_count: int = 14

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
