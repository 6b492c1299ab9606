"""Data models for slug resolution."""

from sluggable.models.config import (
    LoggingConfig,
    SlugFieldConfig,
    SluggableSettings,
)
from sluggable.models.record import (
    Record,
    SluggableModel,
    SoftDeletes,
    data_get,
)

__all__ = [
    # Config
    "SlugFieldConfig",
    "SluggableSettings",
    "LoggingConfig",
    # Records
    "SluggableModel",
    "SoftDeletes",
    "Record",
    "data_get",
]
