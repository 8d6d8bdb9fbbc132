"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"
    STATE_PATH: str = "./liferpg_state.json"
    TIMEZONE: str = "UTC"

    # 분석 기본값
    DEFAULT_WINDOW_DAYS: int = 30
    DYNAMIC_TDEE_WINDOW_DAYS: int = 14


settings = Settings()
