# config.py
"""Настройки приложения, читаются из переменных окружения и файла .env."""
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="Math Chatbot API Server", description="Application name")
    version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Echo SQL statements")

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3001, description="Bind port")

    database_path: str = Field(default="database.db", description="SQLite database file")

    bcrypt_rounds: int = Field(default=10, ge=4, le=31, description="bcrypt cost factor")

    allowed_origins: str = Field(default="*", description="Allowed CORS origins (comma-separated)")
    log_level: str = Field(default="INFO", description="Root log level")

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.database_path}"

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]
