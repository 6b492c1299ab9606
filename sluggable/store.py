"""Reference record stores and the similar-slug query."""

import copy
import json
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from sluggable.constants import SOFT_DELETE_FIELD
from sluggable.exceptions import SlugConflictError
from sluggable.models.record import SluggableModel, data_get
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)


class SlugQuery:
    """Query for sibling slugs equal to a candidate or extending it with the separator."""

    def __init__(
        self,
        store: "InMemorySlugStore | None",
        record: SluggableModel,
        field: str,
        slug: str,
        separator: str,
    ) -> None:
        self.store = store
        self.record = record
        self.field = field
        self.slug = slug
        self.separator = separator
        self.constraints: list[tuple[str, Any]] = []
        self.include_trashed = False

    def where(self, field: str, value: Any) -> "SlugQuery":
        """Only keep siblings whose ``field`` equals ``value``."""
        self.constraints.append((field, value))
        return self

    def with_trashed(self) -> "SlugQuery":
        self.include_trashed = True
        return self

    def matches(self, value: Any) -> bool:
        return isinstance(value, str) and (
            value == self.slug or value.startswith(f"{self.slug}{self.separator}")
        )

    def pluck(self, field: str, key_name: str) -> dict[Any, str]:
        """
        Run the query.

        Args:
            field: Attribute to return
            key_name: Attribute used as the mapping key

        Returns:
            Mapping of sibling key to ``field`` value, in store order
        """
        if self.store is None:
            logger.debug("No store bound, no siblings", record_type=self.record.slug_type_key())
            return {}

        skip_trashed = self.record.uses_soft_deletes() and not self.include_trashed
        result: dict[Any, str] = {}

        for row in self.store.all(self.record.slug_type_key()):
            if skip_trashed and row.get(SOFT_DELETE_FIELD) is not None:
                continue
            if not self.matches(row.get(self.field)):
                continue
            if any(data_get(row, name) != value for name, value in self.constraints):
                continue
            result[row.get(key_name)] = row.get(field)

        return result


class InMemorySlugStore:
    """Keeps record attributes in memory, one table per record type."""

    def __init__(self, unique_fields: Iterable[str] = ()) -> None:
        """
        Initialize the store.

        Args:
            unique_fields: Fields with a storage-level unique constraint
        """
        self.unique_fields = tuple(unique_fields)
        self.tables: dict[str, dict[Any, dict[str, Any]]] = {}
        self.next_ids: dict[str, int] = {}

    def bind(self, *record_types: type[SluggableModel]) -> "InMemorySlugStore":
        """Make this store the one the given record types query for siblings."""
        for record_type in record_types:
            record_type.store = self
        return self

    def all(self, type_key: str) -> list[dict[str, Any]]:
        return [copy.deepcopy(row) for row in self.tables.get(type_key, {}).values()]

    def find(self, type_key: str, key: Any) -> dict[str, Any] | None:
        row = self.tables.get(type_key, {}).get(key)
        return copy.deepcopy(row) if row is not None else None

    def count(self, type_key: str) -> int:
        return len(self.tables.get(type_key, {}))

    def save(self, record: SluggableModel) -> None:
        """
        Insert or update a record.

        Args:
            record: Record to persist; receives an auto-increment key if it has none

        Raises:
            SlugConflictError: If a unique field value is held by another record
        """
        type_key = record.slug_type_key()
        table = self.tables.setdefault(type_key, {})

        key = record.get_key()
        if key is None:
            key = self.next_ids.get(type_key, 1)
            while key in table:
                key += 1

        for field in self.unique_fields:
            value = record.get_attribute(field)
            if value is None:
                continue
            for other_key, row in table.items():
                if other_key != key and row.get(field) == value:
                    logger.warning(
                        "Unique constraint violated", record_type=type_key, field=field, value=value
                    )
                    raise SlugConflictError(
                        f"{type_key}.{field} already holds {value!r}", field=field, value=value
                    )

        record.set_attribute(record.key_name, key)
        table[key] = copy.deepcopy(record.attributes)
        if isinstance(key, int):
            self.next_ids[type_key] = max(self.next_ids.get(type_key, 1), key + 1)

        record.exists = True
        record.sync_original()
        logger.debug("Record saved", record_type=type_key, key=key)

    def delete(self, record: SluggableModel) -> None:
        """Trash a soft-deleting record, remove any other record."""
        if record.uses_soft_deletes():
            record.mark_trashed()
            self.save(record)
            logger.debug("Record trashed", record_type=record.slug_type_key(), key=record.get_key())
            return

        self.force_delete(record)

    def restore(self, record: SluggableModel) -> None:
        record.mark_restored()
        self.save(record)

    def force_delete(self, record: SluggableModel) -> None:
        type_key = record.slug_type_key()
        self.tables.get(type_key, {}).pop(record.get_key(), None)
        record.exists = False
        logger.debug("Record deleted", record_type=type_key, key=record.get_key())


class StoredRow(BaseModel):
    """A persisted record row."""

    key: Any = Field(description="Record key")
    attributes: dict[str, Any] = Field(description="Record attributes")


class StoreSnapshot(BaseModel):
    """On-disk layout of a JSON store."""

    tables: dict[str, list[StoredRow]] = Field(default_factory=dict)
    next_ids: dict[str, int] = Field(default_factory=dict)
    saved_at: datetime | None = Field(default=None)


class JsonSlugStore(InMemorySlugStore):
    """In-memory store that persists every change to a JSON file."""

    def __init__(self, path: Path | str, unique_fields: Iterable[str] = ()) -> None:
        """
        Initialize the store, loading the file if it exists.

        Args:
            path: JSON file path
            unique_fields: Fields with a storage-level unique constraint
        """
        super().__init__(unique_fields)
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.load()

    def load(self) -> None:
        """Replace the in-memory tables with the file contents."""
        if not self.path.exists():
            logger.debug("Store file missing, starting empty", path=str(self.path))
            return

        try:
            snapshot = StoreSnapshot.model_validate(json.loads(self.path.read_text()))
        except Exception as e:
            logger.error("Failed to load store", path=str(self.path), error=str(e))
            raise

        self.tables = {
            type_key: {row.key: row.attributes for row in rows}
            for type_key, rows in snapshot.tables.items()
        }
        self.next_ids = dict(snapshot.next_ids)
        logger.info(
            "Store loaded",
            path=str(self.path),
            records=sum(len(table) for table in self.tables.values()),
        )

    def flush(self) -> None:
        """Write all tables to the file."""
        snapshot = StoreSnapshot(
            tables={
                type_key: [StoredRow(key=key, attributes=row) for key, row in table.items()]
                for type_key, table in self.tables.items()
            },
            next_ids=self.next_ids,
            saved_at=datetime.now(),
        )

        try:
            self.path.write_text(
                json.dumps(snapshot.model_dump(mode="json"), indent=2, ensure_ascii=False)
            )
            logger.debug("Store saved", path=str(self.path))
        except Exception as e:
            logger.error("Failed to save store", path=str(self.path), error=str(e))
            raise

    def save(self, record: SluggableModel) -> None:
        super().save(record)
        self.flush()

    def force_delete(self, record: SluggableModel) -> None:
        super().force_delete(record)
        self.flush()
