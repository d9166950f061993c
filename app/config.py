"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="PlateShare", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=5000, ge=1, le=65535, description="Server port")

    # MongoDB settings
    mongo_uri: Optional[str] = Field(
        default=None, description="Full MongoDB connection URI (overrides Atlas parts)"
    )
    db_user: Optional[str] = Field(default=None, description="Atlas database user")
    db_pass: Optional[str] = Field(default=None, description="Atlas database password")
    db_cluster: str = Field(
        default="cluster0.ysjwzre.mongodb.net", description="Atlas cluster host"
    )
    mongo_db_name: str = Field(default="plateshareDB", description="MongoDB database name")
    mongo_timeout_ms: int = Field(
        default=5000, ge=0, description="Server selection timeout in milliseconds"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    cors_allow_credentials: bool = Field(
        default=False, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="PlateShare API", description="API documentation title"
    )
    api_description: str = Field(
        default="Food sharing service: users, shared foods and food requests",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def resolved_mongo_uri(self) -> str:
        """
        Connection URI for the MongoDB client.

        An explicit MONGO_URI wins. Otherwise the Atlas SRV URI is assembled
        from DB_USER / DB_PASS / DB_CLUSTER, with the credentials URL-quoted.
        Falls back to a local server when no credentials are configured.
        """
        if self.mongo_uri:
            return self.mongo_uri
        if self.db_user and self.db_pass:
            user = quote_plus(self.db_user)
            password = quote_plus(self.db_pass)
            return (
                f"mongodb+srv://{user}:{password}@{self.db_cluster}/"
                "?retryWrites=true&w=majority"
            )
        return "mongodb://localhost:27017"

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
