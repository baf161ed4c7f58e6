"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/authcore.db"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # Bcrypt work factor (higher = more secure but slower)
    # 10 matches bcrypt's customary default cost
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = Field(default=10, ge=4, le=31)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
