"""Slug service: runs the resolution steps for every sluggable field of a record."""

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from sluggable.engine import SlugEngineRegistry
from sluggable.exceptions import InvalidConfiguration
from sluggable.models.config import SlugFieldConfig, SluggableSettings
from sluggable.models.record import SluggableModel
from sluggable.steps import (
    generate_slug,
    get_slug_source,
    make_slug_unique,
    needs_slugging,
    validate_slug,
)
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)

Overrides = Mapping[str, Any] | SlugFieldConfig | None


class SlugService:
    """Computes slugs for records.

    The service holds the process-wide defaults and the engine cache, and is
    usually called from a record's pre-save hook::

        service = SlugService(load_settings("config/sluggable.yaml"))
        if service.slug(post):
            store.save(post)
    """

    def __init__(
        self,
        settings: SluggableSettings | None = None,
        engines: SlugEngineRegistry | None = None,
    ) -> None:
        self.settings = settings or SluggableSettings()
        self.engines = engines if engines is not None else SlugEngineRegistry()

    def slug(self, record: SluggableModel, force: bool = False) -> bool:
        """
        Slug every sluggable field of a record.

        Fields are slugged in declaration order and each slug is written
        before the next field is built, so a later field can use an earlier
        slug as its source. A configuration error stops at the failing
        field, leaving it and the fields after it unwritten.

        Args:
            record: Record to slug
            force: Recompute even when the trigger rules say not to

        Returns:
            True if any slug field now differs from its persisted value
        """
        fields: list[str] = []
        for field, overrides in self._sluggable_fields(record):
            config = self.get_configuration(overrides)
            record.set_attribute(field, self.build_slug(record, field, config, force))
            fields.append(field)

        return record.is_dirty(*fields) if fields else False

    def get_configuration(self, overrides: Overrides = None) -> SlugFieldConfig:
        """
        Merge field overrides into the default configuration.

        Args:
            overrides: Option overrides, a full config, or None

        Returns:
            Merged configuration

        Raises:
            InvalidConfiguration: If an override is unknown or has an invalid value
        """
        defaults = self.settings.defaults
        if overrides is None:
            return defaults
        if isinstance(overrides, SlugFieldConfig):
            return overrides

        try:
            return SlugFieldConfig.model_validate({**dict(defaults), **dict(overrides)})
        except ValidationError as e:
            logger.error("Invalid slug configuration", overrides=str(dict(overrides)), error=str(e))
            raise InvalidConfiguration(f"Invalid slug configuration: {e}") from e

    def build_slug(
        self,
        record: SluggableModel,
        field: str,
        config: SlugFieldConfig,
        force: bool = False,
    ) -> Any:
        """
        Build the slug for one field.

        Args:
            record: Record being slugged
            field: Slug field name
            config: Field configuration
            force: Skip the trigger rules

        Returns:
            The new slug, or the current value when no slug was generated
        """
        slug = record.get_attribute(field)

        if not (force or needs_slugging(record, field)):
            logger.debug("Slug kept", field=field, slug=slug)
            return slug

        source = get_slug_source(record, config.source)
        if not source:
            logger.debug("Empty slug source, slug kept", field=field, source=config.source)
            return slug

        slug = generate_slug(record, source, config, field, self.engines)
        slug = validate_slug(record, slug, config, field)

        if config.unique:
            slug = make_slug_unique(record, slug, config, field)

        logger.debug("Slug built", record_type=record.slug_type_key(), field=field, slug=slug)
        return slug

    def create_slug(
        self,
        record: SluggableModel | type[SluggableModel],
        field: str,
        text: str,
    ) -> str:
        """
        Create a slug from arbitrary text, outside the normal update path.

        Args:
            record: Record instance, or a record type constructible without arguments
            field: Slug field whose configuration applies
            text: Source text

        Returns:
            Validated (and, if configured, unique) slug
        """
        if isinstance(record, type):
            record = record()

        overrides = dict(self._sluggable_fields(record)).get(field)
        config = self.get_configuration(overrides)

        slug = generate_slug(record, text, config, field, self.engines)
        slug = validate_slug(record, slug, config, field)

        if config.unique:
            slug = make_slug_unique(record, slug, config, field)

        return slug

    def _sluggable_fields(self, record: SluggableModel) -> Iterator[tuple[str, Overrides]]:
        """Yield (field, overrides) pairs from a record's sluggable declaration."""
        declaration = record.sluggable()

        if isinstance(declaration, Mapping):
            yield from declaration.items()
            return

        for entry in declaration:
            if isinstance(entry, str):
                yield entry, None
            else:
                yield from entry.items()
