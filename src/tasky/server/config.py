"""Server configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_COLUMNS = ["Backlog", "In Progress", "Review", "Done"]


class Settings(BaseSettings):
    """Settings read from ``TASKY_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="TASKY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite:///tasky.db"
    HOST: str = "localhost"
    PORT: int = 8617
    LOG_LEVEL: str = "info"
    DEFAULT_COLUMNS: list[str] = DEFAULT_COLUMNS
