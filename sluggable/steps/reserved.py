"""Reserved-word guard."""

from collections.abc import Collection

from sluggable.constants import RESERVED_SUFFIX
from sluggable.exceptions import InvalidConfiguration
from sluggable.models.config import SlugFieldConfig
from sluggable.models.record import SluggableModel
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)


def validate_slug(record: SluggableModel, slug: str, config: SlugFieldConfig, field: str) -> str:
    """
    Check a candidate slug against the reserved words.

    A reserved candidate gets ``separator + "1"`` appended once. The result
    is not checked again here; the uniqueness step handles any collision
    this creates.

    Args:
        record: Record the slug belongs to (passed to a callable ``reserved``)
        slug: Candidate slug
        config: Field configuration
        field: Slug field name

    Returns:
        The candidate, suffixed if it was reserved

    Raises:
        InvalidConfiguration: If ``reserved`` is not None, a collection of
            strings, or a callable returning one of those
    """
    reserved = config.reserved

    if reserved is None:
        return slug

    if callable(reserved):
        reserved = reserved(record)
        if reserved is None:
            return slug

    if isinstance(reserved, Collection) and not isinstance(reserved, (str, bytes)):
        if slug in reserved:
            logger.debug("Reserved slug", slug=slug, field=field)
            return f"{slug}{config.separator}{RESERVED_SUFFIX}"

        return slug

    record_type = record.slug_type_key()
    logger.error("Invalid reserved words", record_type=record_type, field=field)
    raise InvalidConfiguration(
        f'Sluggable "reserved" for {record_type}:{field} is not None, a collection, '
        "or a callable that returns None/a collection.",
        record_type=record_type,
        field=field,
    )
