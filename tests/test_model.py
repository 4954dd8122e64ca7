"""
Tests for Token Model Objects

These tests verify:
    - Token creation and derived names
    - Reference accessors
    - Dictionary lookup and reference retrieval
"""

import pytest
from tokenvars.model import Token, Dictionary


class TestToken:
    """Test Token objects."""

    def test_create_token(self):
        """Should create a token with name and value."""
        token = Token(name="color-base", value="#fff")
        assert token.name == "color-base"
        assert token.value == "#fff"
        assert token.references == ()

    def test_from_path_joins_segments(self):
        """Name should be derived from path segments."""
        token = Token.from_path(["color", "base", "gray"], "#ccc")
        assert token.name == "color-base-gray"
        assert token.path == ("color", "base", "gray")

    def test_reference_accessors(self):
        """First reference is exposed as `reference`."""
        token = Token(
            name="color-brand",
            value="#fff",
            original_value="{color.base.value}",
            references=("color-base",),
        )
        assert token.has_reference
        assert token.reference == "color-base"

    def test_literal_has_no_reference(self):
        token = Token(name="size-base", value="16px")
        assert not token.has_reference
        assert token.reference is None

    def test_token_is_immutable(self):
        """Tokens must not change during rendering."""
        token = Token(name="a", value="1")
        with pytest.raises(Exception):
            token.value = "2"


class TestDictionary:
    """Test Dictionary objects."""

    def build(self):
        return Dictionary(
            name="Palette",
            all_properties=[
                Token(name="color-base", value="#fff"),
                Token(name="color-brand", value="#fff", references=("color-base",)),
                Token(name="color-ghost", value="#000", references=("color-missing",)),
            ],
        )

    def test_get_token(self):
        """Should find a token by name."""
        dictionary = self.build()
        assert dictionary.get_token("color-base").value == "#fff"

    def test_get_nonexistent_token(self):
        """Should return None for a missing name."""
        assert self.build().get_token("nope") is None

    def test_get_references(self):
        """Should return the referenced tokens."""
        dictionary = self.build()
        brand = dictionary.get_token("color-brand")
        refs = dictionary.get_references(brand)
        assert [r.name for r in refs] == ["color-base"]

    def test_get_references_skips_missing(self):
        """References to names not in the dictionary are skipped."""
        dictionary = self.build()
        ghost = dictionary.get_token("color-ghost")
        assert dictionary.uses_reference(ghost)
        assert dictionary.get_references(ghost) == []

    def test_empty_dictionary(self):
        dictionary = Dictionary()
        assert dictionary.all_properties == []
        assert dictionary.metadata == {}
