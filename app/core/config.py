import json
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # FastAPI Configuration
    PROJECT_NAME: str = "Document Storage API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Database Configuration
    DATABASE_URL: Optional[str] = None  # Full connection URL (overrides the parts below)
    DATABASE_NAME: str = "documents"
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432

    # Connection Pool Settings (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800  # 30 minutes
    DB_ECHO: bool = False  # SQL query logging

    CREATE_TABLES_ON_STARTUP: bool = Field(
        default=False,
        description="Create tables at startup outside development (always on in development)",
    )

    # CORS Settings - any origin may call the API
    CORS_ORIGINS: List[str] = ["*"]
    ADDITIONAL_CORS_ORIGINS: Optional[str] = None  # JSON array or comma-separated
    CORS_CREDENTIALS: bool = False
    CORS_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_HEADERS: List[str] = ["*"]

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """Resolved SQLAlchemy async URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @property
    def resolved_cors_origins(self) -> List[str]:
        """CORS origins after merging ADDITIONAL_CORS_ORIGINS."""
        origins = list(self.CORS_ORIGINS)

        if self.ADDITIONAL_CORS_ORIGINS:
            try:
                # Try parsing as JSON array first
                if self.ADDITIONAL_CORS_ORIGINS.startswith("["):
                    origins.extend(json.loads(self.ADDITIONAL_CORS_ORIGINS))
                else:
                    origins.extend(
                        origin.strip()
                        for origin in self.ADDITIONAL_CORS_ORIGINS.split(",")
                        if origin.strip()
                    )
            except json.JSONDecodeError:
                # Fallback to single origin
                origins.append(self.ADDITIONAL_CORS_ORIGINS)

        # Remove duplicates while preserving order
        return list(dict.fromkeys(origins))

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_development(self) -> bool:
        """Check if the application is running in development mode."""
        return self.ENVIRONMENT.lower() in ["development", "dev", "local"]

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production mode."""
        return self.ENVIRONMENT.lower() in ["production", "prod"]

    @property
    def should_create_tables(self) -> bool:
        return self.is_development or self.CREATE_TABLES_ON_STARTUP


# Global settings instance
settings = Settings()
