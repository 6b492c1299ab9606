"""Shared pytest fixtures and configuration."""

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from sluggable.models.record import SluggableModel, SoftDeletes
from sluggable.service import SlugService
from sluggable.store import InMemorySlugStore, SlugQuery


class Post(SluggableModel):
    """Post slugged from its title."""

    def sluggable(self) -> dict:
        return {"slug": {"source": "title"}}

    def __str__(self) -> str:
        return self.attributes.get("title") or ""


class Author(SluggableModel):
    """Author slugged from first and last name."""

    def sluggable(self) -> dict:
        return {"slug": {"source": ["first_name", "last_name"]}}


class Page(SoftDeletes, SluggableModel):
    """Soft-deleting page slugged from its string form."""

    def sluggable(self) -> list:
        return ["slug"]

    def __str__(self) -> str:
        return self.attributes.get("title") or ""


class TenantPost(SluggableModel):
    """Post whose slugs only need to be unique per tenant."""

    def sluggable(self) -> dict:
        return {"slug": {"source": "title"}}

    def unique_slug_constraints(self, query: SlugQuery, field, config, slug) -> SlugQuery:
        return query.where("tenant_id", self.get_attribute("tenant_id"))


@pytest.fixture(autouse=True)
def store() -> InMemorySlugStore:
    """Fresh in-memory store bound to every test record type."""
    return InMemorySlugStore().bind(Post, Author, Page, TenantPost)


@pytest.fixture
def models() -> SimpleNamespace:
    """Test record types."""
    return SimpleNamespace(Post=Post, Author=Author, Page=Page, TenantPost=TenantPost)


@pytest.fixture
def service() -> SlugService:
    """Slug service with default settings."""
    return SlugService()


@pytest.fixture
def make_post(store: InMemorySlugStore) -> Callable[..., Post]:
    """Factory for posts already saved to the store."""

    def _make(title: str, slug: str | None = None, **attributes: Any) -> Post:
        post = Post(title=title, slug=slug, **attributes)
        store.save(post)
        return post

    return _make

