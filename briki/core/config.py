"""Application configuration for the Briki plans API.

Configuration is loaded from environment variables (and an optional ``.env``
file), making the service suitable for container-based deployments.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = ""
    database_ssl: bool = False

    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_recycle_seconds: int = 300
    sql_echo: bool = False

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origin: str = "*"
    log_level: str = "info"

    app_env: str = Field(default="development", validation_alias=AliasChoices("APP_ENV", "NODE_ENV"))
    app_version: str = "1.0.0"

    @property
    def sqlalchemy_database_uri(self) -> str:
        url = (self.database_url or "").strip()
        if not url:
            raise RuntimeError("DATABASE_URL environment variable is not set")

        # Managed Postgres providers hand out postgres:// URLs; SQLAlchemy needs an explicit driver.
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+psycopg2://", 1)
        return url

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origin.split(",") if o.strip()]
        return origins or ["*"]

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"


settings = Settings()
