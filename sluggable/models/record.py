"""Record base classes for sluggable types.

A record exposes named attributes with dirty tracking, an existence flag,
and a fixed set of optional hooks the resolver calls. Every hook has a
no-op default, so record types only override what they need.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

from sluggable.constants import DEFAULT_KEY_NAME, SOFT_DELETE_FIELD

if TYPE_CHECKING:
    from sluggable.engine import SlugEngine
    from sluggable.models.config import SlugFieldConfig
    from sluggable.store import InMemorySlugStore, SlugQuery

SluggableDeclaration = Mapping[str, Mapping[str, Any] | None] | Sequence[str | Mapping[str, Any]]

_MISSING = object()


def data_get(target: Any, path: str, default: Any = None) -> Any:
    """
    Read a value from nested mappings or objects using dot notation.

    Args:
        target: Mapping or object to read from
        path: Dotted path (e.g. "author.name")
        default: Value returned when any segment is missing

    Returns:
        The value at ``path`` or ``default``

    Examples:
        >>> data_get({"author": {"name": "Jane"}}, "author.name")
        'Jane'
        >>> data_get({"author": None}, "author.name") is None
        True
    """
    current = target
    for segment in path.split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
        else:
            current = getattr(current, segment, _MISSING)
        if current is _MISSING:
            return default
    return current


class SluggableModel:
    """Base class for records that carry one or more slug fields."""

    key_name: ClassVar[str] = DEFAULT_KEY_NAME
    store: ClassVar["InMemorySlugStore | None"] = None

    def __init__(self, **attributes: Any) -> None:
        self.attributes: dict[str, Any] = dict(attributes)
        self.original: dict[str, Any] = {}
        self.exists = False

    def sluggable(self) -> SluggableDeclaration:
        """Return the sluggable fields: ``{field: overrides or None}`` or a list of field names."""
        raise NotImplementedError(f"{type(self).__name__} must declare its sluggable fields")

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attributes!r})"

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found normally
        attributes = self.__dict__.get("attributes")
        if attributes is not None and name in attributes:
            return attributes[name]
        raise AttributeError(name)

    def get_key(self) -> Any:
        return self.attributes.get(self.key_name)

    def get_attribute(self, name: str) -> Any:
        """Return an attribute value, following dotted paths into nested values."""
        if name in self.attributes:
            return self.attributes[name]
        return data_get(self.attributes, name)

    def set_attribute(self, name: str, value: Any) -> None:
        self.attributes[name] = value

    def is_dirty(self, *names: str) -> bool:
        """Check whether the given attributes (or any attribute) differ from the persisted values."""
        keys = names or tuple(set(self.attributes) | set(self.original))
        return any(
            self.attributes.get(key, _MISSING) != self.original.get(key, _MISSING) for key in keys
        )

    def sync_original(self) -> None:
        self.original = dict(self.attributes)

    def slug_type_key(self) -> str:
        """Key used to partition engine caches and record stores per record type."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    # Optional hooks

    def customize_slug_engine(self, engine: "SlugEngine", field: str) -> "SlugEngine":
        """Adjust the normalization engine used for ``field``. Called once per type and field."""
        return engine

    def unique_slug_constraints(
        self, query: "SlugQuery", field: str, config: "SlugFieldConfig", slug: str
    ) -> "SlugQuery":
        """Narrow the set of siblings a slug must be unique among."""
        return query

    def uses_soft_deletes(self) -> bool:
        return False

    def find_similar_slugs(self, field: str, config: "SlugFieldConfig", slug: str) -> "SlugQuery":
        """Build the query for sibling slugs equal to ``slug`` or ``slug`` + separator + anything."""
        from sluggable.store import SlugQuery

        return SlugQuery(self.store, self, field, slug, config.separator)


class SoftDeletes:
    """Mixin for records that are trashed instead of removed."""

    def uses_soft_deletes(self) -> bool:
        return True

    def trashed(self) -> bool:
        return self.attributes.get(SOFT_DELETE_FIELD) is not None

    def mark_trashed(self) -> None:
        self.attributes[SOFT_DELETE_FIELD] = datetime.now().isoformat()

    def mark_restored(self) -> None:
        self.attributes[SOFT_DELETE_FIELD] = None


class Record(SluggableModel):
    """Generic record whose type name and slug declaration are supplied at runtime."""

    def __init__(
        self,
        type_name: str = "record",
        slug_fields: SluggableDeclaration | None = None,
        source_text: str = "",
        **attributes: Any,
    ) -> None:
        super().__init__(**attributes)
        self.type_name = type_name
        self.slug_fields = slug_fields if slug_fields is not None else {"slug": None}
        self.source_text = source_text

    def sluggable(self) -> SluggableDeclaration:
        return self.slug_fields

    def __str__(self) -> str:
        return self.source_text

    def slug_type_key(self) -> str:
        return self.type_name
