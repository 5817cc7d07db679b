from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal
import os

class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./users.db"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"
    sqlalchemy_echo: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")  # default

ENV_FILE_MAP = {
    "test": ".env.test",
    "staging": ".env.staging",
    "production": ".env.production",
    "development": ".env"
}

@lru_cache()
def get_settings() -> Settings:
    app_env = os.getenv("APP_ENV", "development").lower()
    env_file = ENV_FILE_MAP.get(app_env, ".env")
    return Settings(_env_file=env_file)

# Use em toda aplicação como:
settings = get_settings()
