"""Backends for token output generation (CSS, Sass, Less, Stylus, etc.)."""

from .formats import (
    FormatSyntax,
    UnknownFormatError,
    VariableFormat,
    create_property_formatter,
    get_format,
    register_format,
)
from .variables import formatted_variables, render_with_options, save_variables_file

__all__ = [
    "FormatSyntax",
    "UnknownFormatError",
    "VariableFormat",
    "create_property_formatter",
    "formatted_variables",
    "get_format",
    "register_format",
    "render_with_options",
    "save_variables_file",
]
