"""Normalization engine built on python-slugify, and the per-type engine cache."""

import threading
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from slugify import slugify

from sluggable.utils.logging import get_logger

if TYPE_CHECKING:
    from sluggable.models.record import SluggableModel

logger = get_logger(__name__)


class SlugEngine(BaseModel):
    """Transliterates and normalizes text into a separator-joined token.

    Record types adjust an engine through ``customize_slug_engine``, e.g.
    ``engine.model_copy(update={"stopwords": ["the", "a"]})``.
    """

    lowercase: bool = Field(default=True)
    regex_pattern: str | None = Field(
        default=None, description="Characters matching this pattern are replaced"
    )
    stopwords: list[str] = Field(default_factory=list)
    replacements: list[tuple[str, str]] = Field(
        default_factory=list, description="(old, new) pairs applied before and after slugifying"
    )
    allow_unicode: bool = Field(default=False)
    entities: bool = Field(default=True)
    decimal: bool = Field(default=True)
    hexadecimal: bool = Field(default=True)

    def slugify(self, text: str, separator: str) -> str:
        """
        Normalize text into a slug.

        Args:
            text: Source text
            separator: Word separator

        Returns:
            Normalized slug (may be empty when nothing survives normalization)

        Examples:
            >>> SlugEngine().slugify("Hello World", "-")
            'hello-world'
            >>> SlugEngine().slugify("Café résumé", "_")
            'cafe_resume'
        """
        return slugify(
            text,
            entities=self.entities,
            decimal=self.decimal,
            hexadecimal=self.hexadecimal,
            separator=separator,
            stopwords=self.stopwords,
            regex_pattern=self.regex_pattern,
            lowercase=self.lowercase,
            replacements=self.replacements,
            allow_unicode=self.allow_unicode,
        )


class SlugEngineRegistry:
    """Caches one engine per (record type, field) for the lifetime of the registry."""

    def __init__(self) -> None:
        self._engines: dict[tuple[str, str], SlugEngine] = {}
        self._lock = threading.Lock()

    def get(self, record: "SluggableModel", field: str) -> SlugEngine:
        """
        Return the engine for the record's type and field, creating it on first use.

        Args:
            record: Record whose type owns the engine
            field: Slug field name

        Returns:
            Cached (possibly customized) engine
        """
        key = (record.slug_type_key(), field)
        engine = self._engines.get(key)
        if engine is not None:
            return engine

        with self._lock:
            engine = self._engines.get(key)
            if engine is None:
                engine = record.customize_slug_engine(SlugEngine(), field)
                self._engines[key] = engine
                logger.debug("Slug engine created", record_type=key[0], field=field)

        return engine

    def clear(self) -> None:
        with self._lock:
            self._engines.clear()

    def __len__(self) -> int:
        return len(self._engines)

    def __contains__(self, key: object) -> bool:
        return key in self._engines
