# heroes/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Dict, List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from heroes.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_methods: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_allow_headers: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["Content-Type", "Authorization"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "heroes"
    user: str = "heroes"
    password: str = "heroes"
    schema_name: str = Field(default="heroes", alias="DB_SCHEMA")
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url", "url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class CatalogConfig(BaseModel):
    default_limit: int = Field(20, ge=1, description="Page size when ?limit is missing or unparseable")
    search_limit: int = Field(10, ge=1, description="Result cap for /api/search when ?limit is missing")
    # Leave empty to use the profiles.json shipped inside heroes.domain.catalog
    data_path: Optional[Path] = None


class StorageConfig(BaseModel):
    public_base_url: str = "https://pub-3f7f058fbc1f49f183815380bb719947.r2.dev"
    # profile id -> AI headshot object key in the bucket
    headshots: Dict[str, str] = Field(default_factory=lambda: {
        "alexander-duff": "alexander-duff-ai.jpg",
        "amy-carmichael": "amy-carmichael-ai.jpg",
        "ida-scudder": "ida-scudder-ai.jpg",
        "hudson-taylor": "james-hudson-taylor-ai.jpg",
        "pandita-ramabai": "pandita-ramabai-ai.jpg",
        "william-carey": "william-carey-ai.jpg",
    })
    # served by /ai-headshots when the store has no AI images yet
    fallback_headshots: Annotated[List[str], NoDecode] = Field(default_factory=lambda: [
        "alexander-duff-ai.jpg",
        "amy-carmichael-ai.jpg",
        "ida-scudder-ai.jpg",
        "james-hudson-taylor-ai.jpg",
        "pandita-ramabai-ai.jpg",
        "william-carey-ai.jpg",
    ])

    @field_validator("fallback_headshots", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)

    def url_for(self, filename: str) -> str:
        return f"{self.public_base_url.rstrip('/')}/{filename.lstrip('/')}"


class FeatureFlags(BaseModel):
    store_enabled: bool = True

    @field_validator("*", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "heroes"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"
    version: str = "2.0.0"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    catalog: CatalogConfig = CatalogConfig()
    storage: StorageConfig = StorageConfig()
    features: FeatureFlags = FeatureFlags()

    # -------- Alembic / migrations --------
    alembic_version_table_schema: str = "public"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> str:
        return self.db.schema_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from heroes.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
