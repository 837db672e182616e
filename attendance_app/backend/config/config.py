import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

class Config:
    """
    Settings read straight from environment variables.
    The defaults are only meant for local development.
    """
    # Database
    DB_HOST: str = os.environ.get("DB_HOST", "localhost")
    DB_PORT: int = int(os.environ.get("DB_PORT", 5432))
    DB_USER: str = os.environ.get("DB_USER", "postgres")
    DB_PASSWORD: str = os.environ.get("DB_PASSWORD", "password")
    DB_NAME: str = os.environ.get("DB_NAME", "attendance_app")
    # A full DSN wins over the individual parts above when it is set.
    DATABASE_URL: Optional[str] = os.environ.get("DATABASE_URL")
    DB_POOL_MIN_SIZE: int = int(os.environ.get("DB_POOL_MIN_SIZE", 1))
    DB_POOL_MAX_SIZE: int = int(os.environ.get("DB_POOL_MAX_SIZE", 10))

    # HTTP
    PORT: int = int(os.environ.get("PORT", 8001))

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.environ.get("LOG_DIR", "logs")

    # Rate limiting
    RATE_LIMIT_STORAGE_URL: str = os.environ.get("RATE_LIMIT_STORAGE_URL", "memory://")
    WRITE_RATE_LIMIT: str = os.environ.get("WRITE_RATE_LIMIT", "60/minute")
    READ_RATE_LIMIT: str = os.environ.get("READ_RATE_LIMIT", "120/minute")

    def pool_kwargs(self) -> dict:
        """Keyword arguments for asyncpg.create_pool."""
        kwargs = {"min_size": self.DB_POOL_MIN_SIZE, "max_size": self.DB_POOL_MAX_SIZE}
        if self.DATABASE_URL:
            kwargs["dsn"] = self.DATABASE_URL
        else:
            kwargs.update(
                host=self.DB_HOST,
                port=self.DB_PORT,
                user=self.DB_USER,
                password=self.DB_PASSWORD,
                database=self.DB_NAME,
            )
        return kwargs

# Single importable settings instance
settings = Config()
