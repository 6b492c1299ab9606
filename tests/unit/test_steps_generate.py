"""Unit tests for slug token generation."""

import pytest

from sluggable.engine import SlugEngineRegistry
from sluggable.exceptions import InvalidConfiguration
from sluggable.models.config import SlugFieldConfig
from sluggable.steps.generate import generate_slug


@pytest.fixture
def engines() -> SlugEngineRegistry:
    """Empty engine registry."""
    return SlugEngineRegistry()


class TestGenerateSlug:
    """Test generate_slug function."""

    def test_default_engine(self, models, engines: SlugEngineRegistry) -> None:
        """Test the default engine normalizes text."""
        post = models.Post()
        slug = generate_slug(post, "Hello World", SlugFieldConfig(), "slug", engines)
        assert slug == "hello-world"

    def test_transliteration(self, models, engines: SlugEngineRegistry) -> None:
        """Test accented characters are transliterated."""
        post = models.Post()
        slug = generate_slug(post, "Café résumé", SlugFieldConfig(), "slug", engines)
        assert slug == "cafe-resume"

    def test_custom_separator(self, models, engines: SlugEngineRegistry) -> None:
        """Test the separator joins words."""
        post = models.Post()
        slug = generate_slug(post, "Hello World", SlugFieldConfig(separator="_"), "slug", engines)
        assert slug == "hello_world"

    def test_engine_is_cached(self, models, engines: SlugEngineRegistry) -> None:
        """Test the engine is created once per type and field."""
        post = models.Post()
        generate_slug(post, "One", SlugFieldConfig(), "slug", engines)
        generate_slug(post, "Two", SlugFieldConfig(), "slug", engines)
        assert len(engines) == 1

    def test_custom_method(self, models, engines: SlugEngineRegistry) -> None:
        """Test a custom method's result is used as-is."""
        post = models.Post()
        config = SlugFieldConfig(method=lambda text, sep: text.upper().replace(" ", sep))
        assert generate_slug(post, "Hello World", config, "slug", engines) == "HELLO-WORLD"
        assert len(engines) == 0

    def test_custom_method_receives_separator(self, models, engines: SlugEngineRegistry) -> None:
        """Test a custom method is called with the source and separator."""
        calls = []

        def method(text: str, separator: str) -> str:
            calls.append((text, separator))
            return "x"

        post = models.Post()
        generate_slug(post, "Source", SlugFieldConfig(method=method, separator="."), "slug", engines)
        assert calls == [("Source", ".")]

    def test_invalid_method(self, models, engines: SlugEngineRegistry) -> None:
        """Test a non-callable method is a configuration error."""
        post = models.Post()
        with pytest.raises(InvalidConfiguration) as exc_info:
            generate_slug(post, "Hello", SlugFieldConfig(method="slugify"), "slug", engines)

        assert exc_info.value.field == "slug"
        assert "method" in str(exc_info.value)

    def test_max_length(self, models, engines: SlugEngineRegistry) -> None:
        """Test the slug is cut to max_length characters."""
        post = models.Post()
        config = SlugFieldConfig(max_length=10)
        slug = generate_slug(post, "This is a very long title", config, "slug", engines)
        assert slug == "this-is-a-"
        assert len(slug) == 10

    def test_max_length_counts_characters(self, models, engines: SlugEngineRegistry) -> None:
        """Test truncation keeps multi-byte characters whole."""
        post = models.Post()
        config = SlugFieldConfig(max_length=3, method=lambda text, sep: text)
        assert generate_slug(post, "ééééé", config, "slug", engines) == "ééé"

    def test_max_length_applies_to_custom_method(self, models, engines: SlugEngineRegistry) -> None:
        """Test custom method results are truncated too."""
        post = models.Post()
        config = SlugFieldConfig(max_length=4, method=lambda text, sep: "abcdefgh")
        assert generate_slug(post, "ignored", config, "slug", engines) == "abcd"

    @pytest.mark.parametrize(
        "source",
        ["Hello World", "A much longer title with many words in it", "Ünïcödé Tëxt"],
    )
    def test_length_never_exceeds_max(
        self, models, engines: SlugEngineRegistry, source: str
    ) -> None:
        """Test generated tokens respect max_length."""
        post = models.Post()
        slug = generate_slug(post, source, SlugFieldConfig(max_length=8), "slug", engines)
        assert 0 < len(slug) <= 8
