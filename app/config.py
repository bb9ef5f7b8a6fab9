"""Application configuration with comprehensive validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import Field, model_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.enumerations import StorageBackend
from app.scoring.constants import DEFAULT_SCORING_CONFIG, OverallWeights, ScoringConfig


class Settings(BaseSettings):
    """Application settings with production-grade validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "ESG Scoring Platform"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"
    USER_ID_HEADER: str = "X-User-Id"

    # Storage
    STORAGE_BACKEND: StorageBackend = StorageBackend.MEMORY

    # Snowflake (required only when STORAGE_BACKEND=snowflake)
    SNOWFLAKE_ACCOUNT: Optional[str] = None
    SNOWFLAKE_USER: Optional[str] = None
    SNOWFLAKE_PASSWORD: Optional[SecretStr] = None
    SNOWFLAKE_DATABASE: Optional[str] = None
    SNOWFLAKE_SCHEMA: Optional[str] = None
    SNOWFLAKE_WAREHOUSE: Optional[str] = None
    SNOWFLAKE_ROLE: Optional[str] = None

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_ENABLED: bool = True
    CACHE_TTL_LATEST: int = Field(default=300, ge=0)  # 5 minutes

    # Trend queries
    TREND_DEFAULT_LIMIT: int = Field(default=10, ge=1, le=100)
    TREND_MAX_LIMIT: int = Field(default=100, ge=1, le=1000)

    # Overall pillar weights
    W_ENVIRONMENTAL: float = Field(default=0.40, ge=0.0, le=1.0)
    W_SOCIAL: float = Field(default=0.30, ge=0.0, le=1.0)
    W_GOVERNANCE: float = Field(default=0.30, ge=0.0, le=1.0)

    # Legacy behaviour: a grid emission factor of 0 falls back to the default
    GRID_FACTOR_ZERO_MEANS_DEFAULT: bool = False

    @model_validator(mode="after")
    def validate_pillar_weights(self):
        """Validate pillar weights sum to 1.0."""
        total = self.W_ENVIRONMENTAL + self.W_SOCIAL + self.W_GOVERNANCE
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Pillar weights must sum to 1.0, got {total}")
        return self

    @model_validator(mode="after")
    def validate_trend_limits(self):
        if self.TREND_DEFAULT_LIMIT > self.TREND_MAX_LIMIT:
            raise ValueError("TREND_DEFAULT_LIMIT must not exceed TREND_MAX_LIMIT")
        return self

    @model_validator(mode="after")
    def validate_storage_settings(self):
        """Snowflake backend needs credentials."""
        if self.STORAGE_BACKEND == StorageBackend.SNOWFLAKE:
            if not all([self.SNOWFLAKE_ACCOUNT, self.SNOWFLAKE_USER, self.SNOWFLAKE_PASSWORD]):
                raise ValueError(
                    "SNOWFLAKE_ACCOUNT, SNOWFLAKE_USER and SNOWFLAKE_PASSWORD "
                    "are required when STORAGE_BACKEND=snowflake"
                )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production has safe settings."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self

    @property
    def pillar_weights(self) -> OverallWeights:
        return OverallWeights(
            environmental=self.W_ENVIRONMENTAL,
            social=self.W_SOCIAL,
            governance=self.W_GOVERNANCE,
        )


def build_scoring_config(settings: "Settings") -> ScoringConfig:
    """Built-in constant tables with the settings-level overrides applied."""
    return DEFAULT_SCORING_CONFIG.with_overrides(
        overall_weights=settings.pillar_weights,
        zero_grid_factor_uses_default=settings.GRID_FACTOR_ZERO_MEANS_DEFAULT,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
