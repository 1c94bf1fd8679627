from pydantic_settings import BaseSettings
from pydantic import model_validator
from functools import lru_cache
from urllib.parse import quote_plus
from pathlib import Path
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

# Project root .env (carecompanion -> project root)
ROOT_ENV_FILE = Path(__file__).parent.parent / ".env"

if ROOT_ENV_FILE.exists():
    load_dotenv(ROOT_ENV_FILE)
    logger.info(f"Loaded environment from: {ROOT_ENV_FILE}")


class Settings(BaseSettings):
    # Application
    app_name: str = "Autism Care Companion"
    debug: bool = True
    cors_origins: list[str] = ["*"]

    # Database
    database_url: str = "sqlite+aiosqlite:///./carecompanion.db"

    # Postgres (takes precedence over database_url when host is set)
    postgres_host: str = ""
    postgres_password: str = ""
    postgres_user: str = "postgres"
    postgres_db: str = "postgres"
    postgres_port: int = 5432

    @model_validator(mode="after")
    def validate_postgres_credentials(self):
        """A Postgres host without a password is a misconfiguration."""
        if self.postgres_host and not self.postgres_password:
            raise ValueError(
                "POSTGRES_PASSWORD is required when POSTGRES_HOST is set. "
                f"Please set it in {ROOT_ENV_FILE}"
            )
        return self

    @property
    def get_database_url(self) -> str:
        """Build the database URL, encoding the Postgres password if one is used."""
        if not self.postgres_host:
            return self.database_url
        encoded_password = quote_plus(self.postgres_password)
        return f"postgresql+asyncpg://{self.postgres_user}:{encoded_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    # AI assistant (any OpenAI-compatible chat completions endpoint)
    ai_api_key: str = ""
    ai_base_url: str = "https://api.openai.com/v1"
    ai_model: str = "gpt-4.1-nano"
    ai_max_tokens: int = 500
    ai_temperature: float = 0.7

    class Config:
        env_file = str(ROOT_ENV_FILE)
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
