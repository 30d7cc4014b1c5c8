# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os
import sys
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "")


class DatabaseConfig(BaseModel):
    url: str = Field("sqlite:///blogapi.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = ConfigDict(validate_by_name=True)


class SecurityConfig(BaseModel):
    allowed_origins: list[str] = Field(["*"], alias="ALLOWED_ORIGINS")

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig.model_validate(dict(os.environ))


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig.model_validate(dict(os.environ))


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, ge=1, le=65535, alias="PORT")

    jwt_secret: str = Field("dev", alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    jwt_expires_in: int = Field(3600, ge=1, alias="JWT_EXPIRES_IN")

    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.jwt_secret in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET signs every bearer token and must be a strong random value.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if "*" in self.security.allowed_origins:
            print(
                "\n⚠️  PRODUCTION SECURITY WARNING: CORS allows wildcard (*) origins\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
