"""
Serialization helpers for token dictionaries.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Tokens are stored pre-resolved: `value` is the resolved literal and
`references` lists the referenced token names. Nothing is resolved here.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from tokenvars.model import Dictionary, Token


def token_to_dict(t: Token) -> Dict[str, Any]:
    return {
        "name": t.name,
        "value": t.value,
        "path": list(t.path),
        "original_value": t.original_value,
        "references": list(t.references),
        "comment": t.comment,
        "themeable": t.themeable,
        "attributes": dict(t.attributes),
    }


def token_from_dict(d: Dict[str, Any]) -> Token:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported token entry type: {type(d)}")
    return Token(
        name=d["name"],
        value=d.get("value"),
        path=tuple(d.get("path") or ()),
        original_value=d.get("original_value"),
        references=tuple(d.get("references") or ()),
        comment=d.get("comment"),
        themeable=bool(d.get("themeable", False)),
        attributes=dict(d.get("attributes") or {}),
    )


def dictionary_to_dict(dictionary: Dictionary) -> Dict[str, Any]:
    return {
        "name": dictionary.name,
        "tokens": [token_to_dict(t) for t in dictionary.all_properties],
        "metadata": dictionary.metadata,
    }


def dictionary_from_dict(d: Dict[str, Any]) -> Dictionary:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported dictionary document type: {type(d)}")
    return Dictionary(
        all_properties=[token_from_dict(t) for t in d.get("tokens", [])],
        name=d.get("name", ""),
        metadata=d.get("metadata", {}),
    )


def dictionary_to_json(dictionary: Dictionary) -> str:
    return json.dumps(dictionary_to_dict(dictionary), sort_keys=True)


def dictionary_from_json(s: str) -> Dictionary:
    d = json.loads(s)
    return dictionary_from_dict(d)


def dictionary_to_yaml(dictionary: Dictionary) -> str:
    # sort_keys=False keeps each token's fields readable; list order is preserved either way
    return yaml.safe_dump(dictionary_to_dict(dictionary), sort_keys=False)


def dictionary_from_yaml(s: str) -> Dictionary:
    d = yaml.safe_load(s)
    return dictionary_from_dict(d or {})
