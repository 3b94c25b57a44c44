"""Adapter configuration model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BasePathMode(str, Enum):
    """How the gateway base path is presented to the application."""

    INCLUDE = "include"
    EXCLUDE = "exclude"
    REMOUNT_AND_INCLUDE = "remount_and_include"


class BodyEncoding(str, Enum):
    """How a response body is delivered to the gateway."""

    AUTO = "auto"
    TEXT = "text"
    BINARY = "binary"


class AdapterConfig(BaseModel):
    """
    Immutable adapter policy, set once at startup.

    Attributes:
        base_path_mode: Whether dispatch paths carry the base path, and
            whether routes are remounted under it on first use
        response_types: Lowercase content type -> body encoding
        default_response_type: Encoding used for unlisted content types
    """

    model_config = ConfigDict(frozen=True)

    base_path_mode: BasePathMode = Field(
        default=BasePathMode.REMOUNT_AND_INCLUDE,
        description="Base path handling mode",
    )
    response_types: dict[str, BodyEncoding] = Field(
        default_factory=dict,
        description="Body encoding per content type",
    )
    default_response_type: BodyEncoding = Field(
        default=BodyEncoding.AUTO,
        description="Body encoding for unlisted content types",
    )

    @field_validator("response_types", mode="after")
    @classmethod
    def lowercase_content_types(
        cls, v: dict[str, BodyEncoding]
    ) -> dict[str, BodyEncoding]:
        """Normalize content type keys so lookups are case-insensitive."""
        return {key.strip().lower(): encoding for key, encoding in v.items()}
