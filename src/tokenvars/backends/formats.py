"""
Variable declaration formats.

Turns one Token into one declaration line for an output dialect.

Supports the built-in dialects:
    - CSS:    --color-brand: #fff;   (inside a :root block, indented)
    - SASS:   $color-brand: #fff;
    - LESS:   @color-brand: #fff;
    - STYLUS: $color-brand= #fff;

Other dialects can be added with register_format().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from tokenvars.logconfig import get_logger
from tokenvars.model import Dictionary, Token

log = get_logger("tokenvars.formats")


class VariableFormat(Enum):
    """Built-in output dialects."""
    CSS = "css"
    SASS = "sass"
    LESS = "less"
    STYLUS = "stylus"


class UnknownFormatError(ValueError):
    """Raised when a format name has no registered syntax."""
    pass


@dataclass(frozen=True)
class FormatSyntax:
    """
    Declaration syntax of one dialect.

    Properties:
        prefix: Variable sigil ("--", "$", "@")
        separator: Between name and value (":" or "=")
        indentation: Leading whitespace of every line
        suffix: Statement terminator
        comment_style: "long" (/* */), "short" (//) or "none"
        reference_template: Live reference, formatted with prefix and name
        supports_default: Append " !default" to themeable tokens
    """
    prefix: str
    separator: str = ":"
    indentation: str = ""
    suffix: str = ";"
    comment_style: str = "long"
    reference_template: str = "{prefix}{name}"
    supports_default: bool = False

    def reference(self, name: str) -> str:
        return self.reference_template.format(prefix=self.prefix, name=name)


_FORMATS: Dict[str, FormatSyntax] = {
    VariableFormat.CSS.value: FormatSyntax(
        prefix="--",
        indentation="  ",
        reference_template="var({prefix}{name})",
    ),
    VariableFormat.SASS.value: FormatSyntax(
        prefix="$",
        comment_style="short",
        supports_default=True,
    ),
    VariableFormat.LESS.value: FormatSyntax(prefix="@", comment_style="short"),
    VariableFormat.STYLUS.value: FormatSyntax(prefix="$", separator="=", comment_style="short"),
}


def _format_key(fmt: Union[VariableFormat, str]) -> str:
    return fmt.value if isinstance(fmt, VariableFormat) else str(fmt)


def register_format(name: str, syntax: FormatSyntax) -> None:
    """Register (or replace) the syntax used for `name`."""
    _FORMATS[name] = syntax


def get_format(fmt: Union[VariableFormat, str]) -> FormatSyntax:
    """
    Look up a dialect's syntax.

    Raises:
        UnknownFormatError: If nothing is registered under that name
    """
    key = _format_key(fmt)
    try:
        return _FORMATS[key]
    except KeyError:
        raise UnknownFormatError(
            f"Unknown variable format '{key}'. Known formats: {', '.join(sorted(_FORMATS))}"
        ) from None


def _comment(syntax: FormatSyntax, comment: str) -> str:
    if syntax.comment_style == "short":
        return f" // {comment}"
    if syntax.comment_style == "none":
        return ""
    return f" /* {comment} */"


def _substitute_references(value: str, refs: List[Token], syntax: FormatSyntax) -> str:
    """
    Replace each referenced token's resolved value with its live reference.

    Each reference takes the first match in text that is still literal;
    reference expressions already inserted are never searched again.
    """
    # (text, is_literal) segments
    parts: List[Tuple[str, bool]] = [(value, True)]
    for ref in refs:
        if ref.value is None or str(ref.value) == "":
            continue
        needle = str(ref.value)
        for i, (text, literal) in enumerate(parts):
            if not literal or needle not in text:
                continue
            before, _, after = text.partition(needle)
            parts[i:i + 1] = [(before, True), (syntax.reference(ref.name), False), (after, True)]
            break
    return "".join(text for text, _ in parts)


def create_property_formatter(
    output_references: bool = False,
    dictionary: Optional[Dictionary] = None,
    format: Union[VariableFormat, str] = VariableFormat.CSS,
) -> Callable[[Token], Optional[str]]:
    """
    Build the per-token line formatter for a dialect.

    Args:
        output_references: Emit references as live expressions
            (e.g. var(--color-base)) instead of resolved values
        dictionary: Used to look up referenced tokens
        format: Output dialect

    Returns:
        Function mapping a Token to its declaration line,
        or None when the token has no value to emit
    """
    syntax = get_format(format)

    def format_token(token: Token) -> Optional[str]:
        if token.value is None:
            log.debug("token_skipped", token=token.name, reason="no value")
            return None

        value = str(token.value)

        if output_references and dictionary is not None and dictionary.uses_reference(token):
            value = _substitute_references(value, dictionary.get_references(token), syntax)

        if token.attributes.get("category") == "asset":
            value = f'"{value}"'

        line = f"{syntax.indentation}{syntax.prefix}{token.name}{syntax.separator} {value}"
        if syntax.supports_default and token.themeable:
            line += " !default"
        line += syntax.suffix

        if token.comment:
            line += _comment(syntax, token.comment)

        return line

    return format_token


__all__ = [
    "FormatSyntax",
    "UnknownFormatError",
    "VariableFormat",
    "create_property_formatter",
    "get_format",
    "register_format",
]
