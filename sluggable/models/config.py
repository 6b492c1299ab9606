"""Configuration models for slug fields."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from sluggable.constants import DEFAULT_INCLUDE_TRASHED, DEFAULT_SEPARATOR, DEFAULT_UNIQUE


class SlugFieldConfig(BaseModel):
    """Options for a single (record type, field) pair.

    ``method``, ``unique_suffix`` and ``reserved`` accept any value here;
    they are checked when the resolver uses them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    source: str | list[str] | None = Field(
        default=None, description="Source field(s); None uses the record's string form"
    )
    method: Any = Field(
        default=None, description="Custom callable (text, separator) -> slug"
    )
    separator: str = Field(default=DEFAULT_SEPARATOR, description="Word and suffix separator")
    max_length: int | None = Field(
        default=None, gt=0, description="Maximum slug length in characters"
    )
    unique: bool = Field(default=DEFAULT_UNIQUE, description="Enforce uniqueness among siblings")
    unique_suffix: Any = Field(
        default=None, description="Custom callable (slug, separator, existing) -> suffix"
    )
    reserved: Any = Field(
        default=None, description="Forbidden slugs, or callable (record) -> forbidden slugs"
    )
    include_trashed: bool = Field(
        default=DEFAULT_INCLUDE_TRASHED,
        description="Soft-deleted siblings take part in uniqueness checks",
    )


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=True, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default=None, description="Optional log file")
    rotation: str = Field(default="10 MB", description="Log rotation size/time")
    retention: str = Field(default="30 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class SluggableSettings(BaseModel):
    """Process-wide slug configuration."""

    defaults: SlugFieldConfig = Field(default_factory=SlugFieldConfig)
    models: dict[str, dict[str, dict[str, Any]]] = Field(
        default_factory=dict,
        description="Per record type, per field option overrides",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
