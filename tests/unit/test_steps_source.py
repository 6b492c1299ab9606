"""Unit tests for slug source extraction."""

from sluggable.steps.source import get_slug_source


class TestGetSlugSource:
    """Test get_slug_source function."""

    def test_string_form_without_source(self, models) -> None:
        """Test the record's string form is used when no source is set."""
        page = models.Page(title="About Us")
        assert get_slug_source(page, None) == "About Us"

    def test_single_field(self, models) -> None:
        """Test a single source field."""
        post = models.Post(title="Hello World")
        assert get_slug_source(post, "title") == "Hello World"

    def test_multiple_fields_in_order(self, models) -> None:
        """Test multiple fields are joined with a space in declared order."""
        author = models.Author(first_name="Jane", last_name="Doe")
        assert get_slug_source(author, ["first_name", "last_name"]) == "Jane Doe"
        assert get_slug_source(author, ["last_name", "first_name"]) == "Doe Jane"

    def test_missing_field_keeps_position(self, models) -> None:
        """Test a missing field contributes an empty string."""
        author = models.Author(first_name="Jane", nickname=None, last_name="Doe")
        assert get_slug_source(author, ["first_name", "nickname", "last_name"]) == "Jane  Doe"

    def test_dotted_field(self, models) -> None:
        """Test nested values are read with dot notation."""
        post = models.Post(title="Release", meta={"category": {"name": "News"}})
        assert get_slug_source(post, ["meta.category.name", "title"]) == "News Release"

    def test_non_string_values(self, models) -> None:
        """Test non-string values are converted to text."""
        post = models.Post(title="Episode", number=42)
        assert get_slug_source(post, ["title", "number"]) == "Episode 42"

    def test_all_fields_empty(self, models) -> None:
        """Test no usable source gives an empty string."""
        author = models.Author(first_name=None, last_name="")
        assert get_slug_source(author, ["first_name", "last_name"]) == ""

    def test_empty_string_form(self, models) -> None:
        """Test an empty string form gives an empty source."""
        page = models.Page()
        assert get_slug_source(page, None) == ""
