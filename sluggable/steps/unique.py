"""Uniqueness resolution against sibling slugs."""

import re
from typing import Any

from sluggable.exceptions import InvalidConfiguration
from sluggable.models.config import SlugFieldConfig
from sluggable.models.record import SluggableModel
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)

_LEADING_DIGITS = re.compile(r"[0-9]+")


def get_existing_slugs(
    record: SluggableModel, slug: str, field: str, config: SlugFieldConfig
) -> dict[Any, str]:
    """
    Look up sibling slugs similar to ``slug``.

    "Similar" means equal to the slug, or starting with slug + separator.
    Trashed siblings are only included when ``include_trashed`` is set and
    the record type soft-deletes. Store errors propagate unchanged.

    Args:
        record: Record being slugged
        slug: Candidate slug
        field: Slug field name
        config: Field configuration

    Returns:
        Mapping of sibling key to that sibling's slug
    """
    query = record.find_similar_slugs(field, config, slug)
    query = record.unique_slug_constraints(query, field, config, slug)

    if config.include_trashed and record.uses_soft_deletes():
        query = query.with_trashed()

    existing = query.pluck(field, record.key_name)
    logger.debug("Similar slugs found", slug=slug, field=field, count=len(existing))
    return existing


def make_slug_unique(
    record: SluggableModel, slug: str, config: SlugFieldConfig, field: str
) -> str:
    """
    Make a candidate slug unique among its siblings.

    The candidate is kept when no sibling holds it, or when the only reason
    it shows up is the record's own stored slug. Otherwise a suffix is
    appended, from ``unique_suffix`` if configured or ``generate_suffix``.
    The suffixed slug is not re-checked.

    Args:
        record: Record being slugged
        slug: Candidate slug
        config: Field configuration
        field: Slug field name

    Returns:
        Unique slug

    Raises:
        InvalidConfiguration: If ``unique_suffix`` is neither None nor callable
    """
    separator = config.separator
    existing = get_existing_slugs(record, slug, field, config)
    key = record.get_key()

    if (
        not existing
        or slug not in existing.values()
        or (key is not None and existing.get(key) == slug)
    ):
        return slug

    method = config.unique_suffix
    if method is None:
        suffix = generate_suffix(record, slug, separator, existing)
    elif callable(method):
        suffix = method(slug, separator, existing)
    else:
        record_type = record.slug_type_key()
        logger.error("Invalid unique suffix method", record_type=record_type, field=field)
        raise InvalidConfiguration(
            f'Sluggable "unique_suffix" for {record_type}:{field} is not callable nor None.',
            record_type=record_type,
            field=field,
        )

    unique_slug = f"{slug}{separator}{suffix}"
    logger.debug("Slug made unique", slug=slug, unique_slug=unique_slug, field=field)
    return unique_slug


def generate_suffix(
    record: SluggableModel, slug: str, separator: str, existing: dict[Any, str]
) -> str:
    """
    Compute the default numeric suffix for a colliding slug.

    If the record already owns ``slug + separator + N`` its suffix ``N`` is
    kept. Otherwise the suffix is one more than the highest number found
    after ``slug + separator`` among the existing slugs; values without a
    leading number count as 0.

    Args:
        record: Record being slugged
        slug: Colliding candidate
        separator: Slug separator
        existing: Sibling key to slug mapping

    Returns:
        Suffix to append

    Examples:
        >>> generate_suffix(post, "a", "-", {1: "a", 2: "a-1", 3: "a-2"})
        '3'
        >>> generate_suffix(post, "new-1", "-", {1: "new-1"})
        '1'
    """
    prefix = f"{slug}{separator}"

    own = existing.get(record.get_key()) if record.get_key() is not None else None
    if own is not None and own.startswith(prefix) and _LEADING_DIGITS.fullmatch(own[len(prefix) :]):
        return own[len(prefix) :]

    highest = 0
    for value in existing.values():
        remainder = value[len(prefix) :] if value.startswith(prefix) else ""
        match = _LEADING_DIGITS.match(remainder)
        if match:
            highest = max(highest, int(match.group()))

    return str(highest + 1)
