"""Unit tests for slug utilities."""

import pytest

from unique_alloc.utils.slug import slugify_text


class TestSlugifyText:
    """Test slugify_text function."""

    def test_basic_slug_generation(self) -> None:
        """Test basic slug generation."""
        assert slugify_text("Hello World") == "hello-world"
        assert slugify_text("John Doe") == "john-doe"

    def test_slug_with_special_characters(self) -> None:
        """Test runs of special characters collapse to one separator."""
        assert slugify_text("AI & ML: The Future!") == "ai-ml-the-future"
        assert slugify_text("Test (2024) - Part 1") == "test-2024-part-1"
        assert slugify_text("snake_case_name") == "snake-case-name"

    def test_slug_trims_separators(self) -> None:
        """Test leading and trailing separators are removed."""
        assert slugify_text("--Hello--") == "hello"
        assert slugify_text("   spaced out   ") == "spaced-out"

    def test_slug_max_length(self) -> None:
        """Test slug generation with max length."""
        slug = slugify_text("abcdefghijklmnopqrstuvwxyz", max_length=10)
        assert slug == "abcdefghij"

    def test_slug_default_max_length(self) -> None:
        """Test the default cap of 60 characters."""
        assert len(slugify_text("word " * 40)) <= 60

    def test_slug_truncation_drops_trailing_separator(self) -> None:
        """Test a cut landing on a separator does not leave it dangling."""
        assert slugify_text("Hello World", max_length=6) == "hello"

    def test_slug_with_unicode(self) -> None:
        """Test slug generation with unicode characters."""
        assert slugify_text("Café résumé") == "cafe-resume"

    @pytest.mark.parametrize("text", ["", "   ", "!!!???", "@#$%"])
    def test_slug_empty_result(self, text: str) -> None:
        """Test inputs with nothing representable produce an empty slug."""
        assert slugify_text(text) == ""

    @pytest.mark.parametrize("text", ["Hello World", "AI & ML: The Future!", "x" * 80])
    def test_slug_idempotent(self, text: str) -> None:
        """Test normalizing a slug again leaves it unchanged."""
        once = slugify_text(text)
        assert slugify_text(once) == once

    def test_slug_invalid_max_length(self) -> None:
        """Test a non-positive max length is rejected."""
        with pytest.raises(ValueError):
            slugify_text("Hello", max_length=0)

    def test_slug_html_entities_not_decoded(self) -> None:
        """Test entity text is slugged literally instead of decoded."""
        assert slugify_text("&lt;&gt;") == "lt-gt"
        assert slugify_text("Tom &amp; Jerry") == "tom-amp-jerry"
        assert slugify_text("&#65;&#x42;") == "65-x42"
