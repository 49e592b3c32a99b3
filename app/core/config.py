"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (DB URI, credentials, CORS allow-list)
- Validates configuration on startup
- Environment-specific settings
"""

from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional, Literal, List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # MongoDB
    MONGODB_URL: Optional[str] = Field(
        default=None,
        description="Full MongoDB connection URI (overrides the credential-built URI)"
    )
    DB_USERNAME: Optional[str] = Field(
        default=None,
        description="Atlas cluster username"
    )
    DB_PASSWORD: Optional[str] = Field(
        default=None,
        description="Atlas cluster password"
    )
    MONGODB_CLUSTER_HOST: str = Field(
        default="professorcluster.rlegbqz.mongodb.net",
        description="Atlas cluster host used with DB_USERNAME/DB_PASSWORD"
    )
    MONGODB_APP_NAME: str = Field(
        default="ProfessorCluster",
        description="appName reported to the cluster"
    )
    MONGODB_DB_NAME: str = Field(
        default="tournext",
        description="MongoDB database name"
    )
    MONGODB_STRICT_API: bool = Field(
        default=True,
        description="Pin the Stable API v1 in strict mode"
    )
    MONGODB_CONNECT_RETRIES: int = Field(
        default=3,
        description="Connection attempts before startup fails"
    )
    MONGODB_RETRY_DELAY: float = Field(
        default=2.0,
        description="Initial delay between connection attempts in seconds"
    )

    # HTTP
    HOST: str = Field(default="0.0.0.0", description="Bind address")
    PORT: int = Field(default=5100, description="Listen port")
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:5173", "https://tournext-ada60.web.app"],
        description="Allowed CORS origins"
    )

    # Behaviour
    STRICT_NOT_FOUND: bool = Field(
        default=True,
        description="Answer 404 for deletes, lookups and updates that match nothing"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @property
    def mongodb_uri(self) -> str:
        """Connection string, built from the Atlas credentials when no URL is given."""
        if self.MONGODB_URL:
            return self.MONGODB_URL
        if self.DB_USERNAME and self.DB_PASSWORD:
            return (
                f"mongodb+srv://{quote_plus(self.DB_USERNAME)}:{quote_plus(self.DB_PASSWORD)}"
                f"@{self.MONGODB_CLUSTER_HOST}/?retryWrites=true&w=majority"
                f"&appName={self.MONGODB_APP_NAME}"
            )
        return "mongodb://localhost:27017"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    config = config or settings
    errors = []

    if not config.MONGODB_DB_NAME:
        errors.append("MONGODB_DB_NAME is required")

    if not config.CORS_ORIGINS:
        errors.append("CORS_ORIGINS must list at least one origin")

    # Production-specific validations
    if config.is_production:
        if not config.MONGODB_URL and not (config.DB_USERNAME and config.DB_PASSWORD):
            errors.append("MONGODB_URL or DB_USERNAME/DB_PASSWORD is required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
