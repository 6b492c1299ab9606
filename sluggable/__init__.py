"""Slug generation for stored records: normalization, reserved words and uniqueness."""

from sluggable.engine import SlugEngine, SlugEngineRegistry
from sluggable.exceptions import InvalidConfiguration, SlugConflictError, SluggableError
from sluggable.models import (
    LoggingConfig,
    Record,
    SlugFieldConfig,
    SluggableModel,
    SluggableSettings,
    SoftDeletes,
)
from sluggable.retry import save_with_slug
from sluggable.service import SlugService
from sluggable.store import InMemorySlugStore, JsonSlugStore, SlugQuery

__version__ = "1.0.0"

__all__ = [
    "SlugService",
    "SlugEngine",
    "SlugEngineRegistry",
    "SlugFieldConfig",
    "SluggableSettings",
    "LoggingConfig",
    "SluggableModel",
    "SoftDeletes",
    "Record",
    "SlugQuery",
    "InMemorySlugStore",
    "JsonSlugStore",
    "save_with_slug",
    "SluggableError",
    "InvalidConfiguration",
    "SlugConflictError",
]
