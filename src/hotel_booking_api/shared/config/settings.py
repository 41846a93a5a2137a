from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Hotel Booking API", validation_alias=AliasChoices("APP_NAME"))
    app_version: str = Field(default="0.1.0", validation_alias=AliasChoices("APP_VERSION"))
    app_env: str = Field(default="local", validation_alias=AliasChoices("APP_ENV"))
    app_debug: bool = Field(default=False, validation_alias=AliasChoices("APP_DEBUG", "DEBUG"))
    api_host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("API_HOST"))
    api_port: int = Field(default=8080, validation_alias=AliasChoices("API_PORT"))
    cors_allowed_origins: str = Field(
        default="",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS"),
    )
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))

    database_url: str = Field(
        default="",
        validation_alias=AliasChoices("DATABASE_URL", "POSTGRES_URL"),
    )
    postgres_host: str = Field(default="localhost", validation_alias=AliasChoices("POSTGRES_HOST"))
    postgres_port: int = Field(default=5432, validation_alias=AliasChoices("POSTGRES_PORT"))
    postgres_user: str = Field(default="postgres", validation_alias=AliasChoices("POSTGRES_USER"))
    postgres_password: str = Field(default="", validation_alias=AliasChoices("POSTGRES_PASSWORD"))
    postgres_database: str = Field(
        default="hotel_booking",
        validation_alias=AliasChoices("POSTGRES_DATABASE", "POSTGRES_DB"),
    )
    db_pool_size: int = Field(default=10, validation_alias=AliasChoices("DB_POOL_SIZE"))
    db_max_overflow: int = Field(default=20, validation_alias=AliasChoices("DB_MAX_OVERFLOW"))
    db_echo: bool = Field(default=False, validation_alias=AliasChoices("DB_ECHO"))
    db_create_schema: bool = Field(
        default=False,
        validation_alias=AliasChoices("DB_CREATE_SCHEMA"),
    )
    database_url_from_secrets: bool = Field(
        default=False,
        validation_alias=AliasChoices("DATABASE_URL_FROM_SECRETS"),
    )

    secrets_provider: Literal["file", "env", "aws"] = Field(
        default="file",
        validation_alias=AliasChoices("SECRETS_PROVIDER"),
    )
    secrets_file_path: str = Field(
        default=".secrets",
        validation_alias=AliasChoices("SECRETS_FILE_PATH"),
    )
    aws_secret_name: str = Field(default="", validation_alias=AliasChoices("AWS_SECRET_NAME"))
    aws_region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
    )

    jwt_algorithm: str = Field(default="HS256", validation_alias=AliasChoices("JWT_ALGORITHM"))
    access_token_ttl_days: int = Field(
        default=30,
        validation_alias=AliasChoices("ACCESS_TOKEN_TTL_DAYS"),
    )
    password_hash_rounds: int = Field(
        default=12,
        validation_alias=AliasChoices("PASSWORD_HASH_ROUNDS", "BCRYPT_ROUNDS"),
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        return [value.strip() for value in self.cors_allowed_origins.split(",") if value.strip()]


settings = Settings()
