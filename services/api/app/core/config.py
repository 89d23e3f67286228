from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# services/api/app/core/config.py -> BASE_DIR == services/api
BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
    )

    # Environment
    env: str = Field(default="dev", validation_alias="ENV")

    # Application
    api_name: str = Field(default="yorez-api", validation_alias="API_NAME")
    # Prefix of the X-<app>-alert/-error/-params headers read by the web client
    client_app_name: str = Field(default="yorezApp", validation_alias="CLIENT_APP_NAME")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Database
    database_url: str = Field(
        default="sqlite+pysqlite:///./yorez.db",
        validation_alias="DATABASE_URL",
    )

    # Auth
    auth_secret_key: str = Field(
        default="dev-secret-key", validation_alias="AUTH_SECRET_KEY"
    )
    auth_algorithm: str = Field(default="HS512", validation_alias="AUTH_ALGORITHM")
    auth_access_token_ttl_minutes: int = Field(
        default=60 * 24, validation_alias="AUTH_ACCESS_TOKEN_TTL_MINUTES"
    )
    auth_cookie_name: str = Field(
        default="yorez_auth", validation_alias="AUTH_COOKIE_NAME"
    )

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:9000"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """
        Supported env formats:
          - JSON list: '["http://localhost:9000"]'
          - Bracket list (no quotes): '[http://localhost:9000, http://localhost:8080]'
          - Comma-separated: 'http://localhost:9000, http://localhost:8080'
          - '*' wildcard
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if not isinstance(v, str):
            raise TypeError("cors_origins must be a string or list of strings")

        s = v.strip()
        if not s:
            return []
        if s == "*":
            return ["*"]

        if s.startswith("[") and s.endswith("]"):
            try:
                parsed = json.loads(s)
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
            except json.JSONDecodeError:
                # Not JSON, treat as a simple bracket list without quotes
                inner = s[1:-1].strip()
                if not inner:
                    return []
                parts = [p.strip().strip('"').strip("'") for p in inner.split(",")]
                return [p for p in parts if p]

        parts = [p.strip() for p in s.split(",")]
        return [p for p in parts if p]

    # Pagination
    page_size_default: int = Field(default=20, ge=1, validation_alias="PAGE_SIZE_DEFAULT")
    page_size_max: int = Field(default=2000, ge=1, validation_alias="PAGE_SIZE_MAX")

    # OpenTelemetry
    otel_enabled: bool = Field(default=False, validation_alias="OTEL_ENABLED")
    otel_otlp_endpoint: str = Field(
        default="http://localhost:4318/v1/traces",
        validation_alias="OTEL_OTLP_ENDPOINT",
    )


settings = Settings()
