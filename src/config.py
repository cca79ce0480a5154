"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = ""
    db_user: str = "vagrant"
    db_password: str = "123"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "lightbnb"

    # Pool sizing
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10

    # Query defaults
    default_result_limit: int = 10

    log_level: str = "INFO"

    @property
    def dsn(self) -> str:
        """Connection string, preferring an explicit DATABASE_URL."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


settings = Settings()
