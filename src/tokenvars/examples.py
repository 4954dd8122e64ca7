"""
Example token dictionary for demos and tests.

Builds a small color/size palette with a three-level alias chain:
    color-font-link -> color-brand-primary -> color-base-blue
declared in the "wrong" order on purpose, so reference ordering has
something to do.
"""
from tokenvars.model import Dictionary, Token


def build_example_dictionary() -> Dictionary:
    dictionary = Dictionary(name="Example Palette")

    tokens = [
        Token.from_path(
            ["color", "font", "link"],
            "#1a73e8",
            original_value="{color.brand.primary.value}",
            references=("color-brand-primary",),
            comment="Hyperlink text",
        ),
        Token.from_path(
            ["color", "brand", "primary"],
            "#1a73e8",
            original_value="{color.base.blue.value}",
            references=("color-base-blue",),
            themeable=True,
        ),
        Token.from_path(["color", "base", "blue"], "#1a73e8"),
        Token.from_path(["color", "base", "gray"], "#cccccc"),
        Token.from_path(["size", "base"], "16px"),
        Token.from_path(
            ["size", "border"],
            "16px solid #cccccc",
            original_value="{size.base.value} solid {color.base.gray.value}",
            references=("size-base", "color-base-gray"),
        ),
        Token.from_path(
            ["asset", "logo"],
            "images/logo.svg",
            attributes={"category": "asset"},
        ),
    ]

    dictionary.all_properties = tokens
    dictionary.metadata = {"source": "examples.py"}

    return dictionary
