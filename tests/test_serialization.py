"""
Tests for serialization and deserialization of token dictionaries.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `tokenvars.serialization`.
"""

import pytest
from tokenvars.model import Dictionary, Token
from tokenvars.serialization import (
    dictionary_to_dict,
    dictionary_from_dict,
    dictionary_to_json,
    dictionary_from_json,
    dictionary_to_yaml,
    dictionary_from_yaml,
    token_from_dict,
)


def build_sample_dictionary() -> Dictionary:
    dictionary = Dictionary(name="Serialization Test Palette")
    dictionary.all_properties = [
        Token.from_path(["color", "base"], "#ffffff"),
        Token.from_path(
            ["color", "brand"],
            "#ffffff",
            original_value="{color.base.value}",
            references=("color-base",),
            comment="Brand color",
            themeable=True,
        ),
        Token.from_path(["asset", "logo"], "logo.svg", attributes={"category": "asset"}),
    ]
    dictionary.metadata = {"source": "tokens/color.yaml"}
    return dictionary


def test_json_roundtrip():
    dictionary = build_sample_dictionary()
    before = dictionary_to_dict(dictionary)
    restored = dictionary_from_json(dictionary_to_json(dictionary))
    assert dictionary_to_dict(restored) == before


def test_yaml_roundtrip():
    dictionary = build_sample_dictionary()
    before = dictionary_to_dict(dictionary)
    restored = dictionary_from_yaml(dictionary_to_yaml(dictionary))
    assert dictionary_to_dict(restored) == before


def test_roundtrip_keeps_token_order():
    dictionary = build_sample_dictionary()
    restored = dictionary_from_yaml(dictionary_to_yaml(dictionary))
    assert [t.name for t in restored.all_properties] == ["color-base", "color-brand", "asset-logo"]


def test_minimal_token_dict():
    token = token_from_dict({"name": "size-base", "value": "16px"})
    assert token.references == ()
    assert token.path == ()
    assert not token.themeable


def test_token_requires_name():
    with pytest.raises(KeyError):
        token_from_dict({"value": "16px"})


def test_token_entry_must_be_mapping():
    with pytest.raises(TypeError):
        dictionary_from_dict({"tokens": ["color-base"]})


def test_empty_yaml_is_empty_dictionary():
    dictionary = dictionary_from_yaml("")
    assert dictionary.all_properties == []


def test_yaml_document_must_be_mapping():
    with pytest.raises(TypeError):
        dictionary_from_yaml("- a\n- b\n")


def test_json_document_must_be_mapping():
    with pytest.raises(TypeError):
        dictionary_from_json('["color-base"]')
