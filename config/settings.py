"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url
from typing import Optional


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    database_url: Optional[str] = None       # full URL, overrides the parts below
    db_driver: str = "postgresql+asyncpg"    # or "mssql+aioodbc" for Azure SQL
    db_host: str = "localhost"
    db_port: Optional[int] = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "tasks"
    db_query: dict = {}                      # e.g. {"driver": "ODBC Driver 18 for SQL Server"}
    db_echo: bool = False
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_recycle: int = 3600

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = "change-me-jwt-secret-key"   # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 3600                  # 1 hour
    bcrypt_rounds: int = 10

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 5001
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    def get_database_url(self) -> URL:
        """
        Return the SQLAlchemy URL, built from the ``db_*`` parts unless
        ``database_url`` is set.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query=self.db_query,
        )


config = Settings()
