"""Source extraction: build the text a slug is generated from."""

from sluggable.constants import SOURCE_JOINER
from sluggable.models.record import SluggableModel


def get_slug_source(record: SluggableModel, source: str | list[str] | None) -> str:
    """
    Build the source text for a slug.

    Args:
        record: Record to read from
        source: None for the record's string form, or one or more
            (optionally dotted) field names

    Returns:
        Source text, or an empty string when no field holds a value

    Examples:
        >>> get_slug_source(author, ["first_name", "last_name"])
        'Jane Doe'
        >>> get_slug_source(author, ["first_name", "nickname", "last_name"])
        'Jane  Doe'
    """
    if source is None:
        return str(record)

    fields = [source] if isinstance(source, str) else list(source)
    parts: list[str] = []
    for name in fields:
        value = record.get_attribute(name)
        parts.append("" if value is None else str(value))

    if not any(parts):
        return ""

    return SOURCE_JOINER.join(parts)
