from typing import List, Optional
import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class DatabaseSettings(BaseSettings):
    url: str = "sqlite+aiosqlite:///./quiz.db"
    echo: bool = False

    model_config = SettingsConfigDict(env_prefix='DATABASE_')


class SummarySettings(BaseSettings):
    # OpenAI-compatible chat completions endpoint used for the personalised summary
    api_url: str = "https://api.openai.com/v1/chat/completions"
    # Read from SUMMARY_API_KEY, falling back to the conventional OPENAI_API_KEY
    api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("SUMMARY_API_KEY", "OPENAI_API_KEY"))
    model: str = "gpt-4o-mini"
    timeout_seconds: float = 10.0
    max_tokens: int = 300
    temperature: float = 0.7
    enabled: bool = True

    model_config = SettingsConfigDict(env_prefix='SUMMARY_', populate_by_name=True)


class AdminSettings(BaseSettings):
    username: str = "admin"
    password: str = "admin"
    token_ttl_seconds: int = 86400  # 24h, matches the cookie Max-Age
    token_backend: str = "memory"  # "memory" or "redis"

    model_config = SettingsConfigDict(env_prefix='ADMIN_')


class RedisSettings(BaseSettings):
    url: str = "redis://localhost:6379/0"

    model_config = SettingsConfigDict(env_prefix='REDIS_')


class QuizSettings(BaseSettings):
    max_score: int = 7  # Highest tally a single RIASEC type can reach
    log_level: str = "INFO"
    cors_allow_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix='QUIZ_')


# Instantiate settings
database_settings = DatabaseSettings()
summary_settings = SummarySettings()
admin_settings = AdminSettings()
redis_settings = RedisSettings()
quiz_settings = QuizSettings()

