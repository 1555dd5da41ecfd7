"""
Configuration Management
Environment-based settings for the gateway and its upstream data service
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    # Service info
    service_name: str = "user-gateway"
    service_version: str = "1.0.0"
    port: int = 3000

    # Upstream data service
    data_service_url: str = "http://localhost:3001"
    data_service_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("data_service_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("data_service_timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("DATA_SERVICE_TIMEOUT must be greater than zero")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return v

    def log_config(self):
        """Log configuration at startup"""
        logger.info(
            "Gateway configuration loaded",
            service=self.service_name,
            port=self.port,
            data_service_url=self.data_service_url,
            data_service_timeout=self.data_service_timeout,
        )


@lru_cache
def get_settings() -> Settings:
    """Settings for the process entry point, read once from the environment"""
    return Settings()
