"""Trigger evaluation: does a record field need a (new) slug?"""

from sluggable.models.record import SluggableModel


def is_empty(value: object) -> bool:
    """Check whether a slug value counts as unset; the string "0" does too."""
    return not value or value == "0"


def needs_slugging(record: SluggableModel, field: str) -> bool:
    """
    Decide whether a slug must be computed for ``field``.

    An empty value is always filled in. A value the caller changed by hand
    is never overwritten. Otherwise only records that were never persisted
    get a slug; once stored, a slug is stable.

    Args:
        record: Record being slugged
        field: Slug field name

    Returns:
        True if the slug should be (re)computed
    """
    if is_empty(record.get_attribute(field)):
        return True

    if record.is_dirty(field):
        return False

    return not record.exists
