"""Token generation: normalize source text into a candidate slug."""

from sluggable.engine import SlugEngineRegistry
from sluggable.exceptions import InvalidConfiguration
from sluggable.models.config import SlugFieldConfig
from sluggable.models.record import SluggableModel
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)


def generate_slug(
    record: SluggableModel,
    source: str,
    config: SlugFieldConfig,
    field: str,
    engines: SlugEngineRegistry,
) -> str:
    """
    Generate a candidate slug from source text.

    Uses the cached engine for the record type and field unless a custom
    ``method`` is configured, whose result is taken as-is. Either way the
    result is cut to ``max_length`` characters.

    Args:
        record: Record the slug belongs to
        source: Source text
        config: Field configuration
        field: Slug field name
        engines: Engine cache

    Returns:
        Candidate slug

    Raises:
        InvalidConfiguration: If ``method`` is neither None nor callable
    """
    separator = config.separator
    method = config.method

    if method is None:
        slug = engines.get(record, field).slugify(source, separator)
    elif callable(method):
        slug = method(source, separator)
    else:
        record_type = record.slug_type_key()
        logger.error(
            "Invalid slug method",
            record_type=record_type,
            field=field,
            method=repr(method),
        )
        raise InvalidConfiguration(
            f'Sluggable "method" for {record_type}:{field} is not callable nor None.',
            record_type=record_type,
            field=field,
        )

    if isinstance(slug, str) and config.max_length:
        slug = slug[: config.max_length]

    return slug
