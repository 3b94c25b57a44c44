"""Configuration management using Pydantic Settings."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_lamb.models.config import AdapterConfig, BasePathMode, BodyEncoding


class Settings(BaseSettings):
    """Adapter settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Only load .env file in development (not Lambda/production)
        env_file=".env" if os.getenv("AWS_EXECUTION_ENV") is None else None,
        env_file_encoding="utf-8",
        env_prefix="LAMB_",
        case_sensitive=False,
        extra="ignore",
    )

    # Path handling
    base_path_mode: BasePathMode = BasePathMode.REMOUNT_AND_INCLUDE

    # Response body encoding, e.g. LAMB_RESPONSE_TYPES='{"image/png": "binary"}'
    response_types: dict[str, BodyEncoding] = {}
    default_response_type: BodyEncoding = BodyEncoding.AUTO

    # Logging
    log_level: str = "INFO"

    @field_validator("base_path_mode", "default_response_type", mode="before")
    @classmethod
    def normalize_enum_value(cls, v):
        """Accept RemountAndInclude, remount-and-include and similar spellings."""
        if isinstance(v, str):
            value = v.strip().replace("-", "_")
            if value.lower() == "remountandinclude":
                return BasePathMode.REMOUNT_AND_INCLUDE
            return value.lower()
        return v

    def to_adapter_config(self) -> AdapterConfig:
        """
        Build the immutable adapter policy from these settings.

        Returns:
            AdapterConfig snapshot
        """
        return AdapterConfig(
            base_path_mode=self.base_path_mode,
            response_types=self.response_types,
            default_response_type=self.default_response_type,
        )


# Global settings instance
settings = Settings()
