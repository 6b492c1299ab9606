"""Unit tests for saving with slug conflict retries."""

import pytest

from sluggable.exceptions import SlugConflictError
from sluggable.retry import save_with_slug
from sluggable.service import SlugService
from sluggable.store import InMemorySlugStore


@pytest.fixture
def unique_store(models) -> InMemorySlugStore:
    """Store with a unique constraint on slug."""
    return InMemorySlugStore(unique_fields=["slug"]).bind(models.Post)


class AlwaysConflicting(InMemorySlugStore):
    """Store that rejects every save."""

    def __init__(self) -> None:
        super().__init__()
        self.attempts = 0

    def save(self, record) -> None:
        self.attempts += 1
        raise SlugConflictError("conflict", field="slug", value=record.get_attribute("slug"))


class TestSaveWithSlug:
    """Test save_with_slug function."""

    def test_saves_new_record(self, service: SlugService, unique_store, models) -> None:
        """Test a record without conflicts is slugged and saved."""
        post = models.Post(title="Hello World")
        assert save_with_slug(service, post, unique_store) is True
        assert post.exists
        assert post.get_attribute("slug") == "hello-world"

    def test_resolves_race(self, service: SlugService, unique_store, models) -> None:
        """Test a slug taken between resolving and saving is recomputed."""
        late = models.Post(title="Hello World")
        service.slug(late)

        early = models.Post(title="Hello World")
        save_with_slug(service, early, unique_store)

        save_with_slug(service, late, unique_store)
        assert early.get_attribute("slug") == "hello-world"
        assert late.get_attribute("slug") == "hello-world-1"
        assert late.exists

    def test_gives_up(self, service: SlugService, models) -> None:
        """Test the conflict propagates after the last attempt."""
        store = AlwaysConflicting().bind(models.Post)
        with pytest.raises(SlugConflictError):
            save_with_slug(service, models.Post(title="Hello"), store, attempts=2)
        assert store.attempts == 2

    def test_conflicting_manual_slug_is_regenerated(
        self, service: SlugService, unique_store, models
    ) -> None:
        """Test a hand-set slug taken in the store is rebuilt from the title."""
        save_with_slug(service, models.Post(title="Other", slug="custom"), unique_store)

        post = models.Post(title="Hello World", slug="custom")
        assert save_with_slug(service, post, unique_store) is True
        assert post.get_attribute("slug") == "hello-world"
        assert post.exists
