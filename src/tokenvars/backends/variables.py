"""
Variables file generator.

Converts a Dictionary into a newline-joined list of variable
declarations (a Sass/Less/Stylus variables file, or the body of a
CSS :root block).

Two modes, selected by output_references:
    - DISABLED: tokens are emitted in dictionary order, values resolved
    - ENABLED: tokens are reordered so every referenced token is
      declared first, and references are emitted as live expressions
"""

from typing import Callable, Optional, Union

from tokenvars.backends.formats import VariableFormat, create_property_formatter
from tokenvars.logconfig import get_logger
from tokenvars.model import Dictionary
from tokenvars.options import OutputReferences, RenderOptions
from tokenvars.ordering import sort_by_reference

log = get_logger("tokenvars.variables")


def formatted_variables(
    format: Union[VariableFormat, str],
    dictionary: Dictionary,
    output_references: Union[bool, OutputReferences] = False,
    formatter: Optional[Callable] = None,
) -> str:
    """
    Generate variable declarations for every token in a dictionary.

    Args:
        format: Output dialect (css, sass, less, stylus, or a registered name)
        dictionary: Tokens to render; never modified
        output_references: Emit references as live expressions
        formatter: Optional factory replacing create_property_formatter,
            called with output_references, dictionary and format keywords

    Returns:
        Declarations joined by newlines, no trailing newline

    Raises:
        ReferenceCycleError: If output_references is on and tokens
            reference each other in a loop
    """
    enabled = bool(OutputReferences.coerce(output_references))
    tokens = list(dictionary.all_properties)

    # Imperative dialects need a variable defined before it is used
    if enabled:
        tokens = sort_by_reference(tokens)
        log.debug("ordered_by_reference", dictionary=dictionary.name, tokens=len(tokens))

    factory = formatter or create_property_formatter
    format_token = factory(output_references=enabled, dictionary=dictionary, format=format)

    lines = []
    for token in tokens:
        line = format_token(token)
        if line:
            lines.append(line)

    return "\n".join(lines)


def render_with_options(
    options: RenderOptions,
    dictionary: Dictionary,
    formatter: Optional[Callable] = None,
) -> str:
    """
    Generate variable declarations as described by a RenderOptions.

    Args:
        options: Format and output_references setting
        dictionary: Tokens to render
        formatter: Optional line formatter factory, as for formatted_variables

    Returns:
        Declarations joined by newlines
    """
    return formatted_variables(
        options.format,
        dictionary,
        output_references=options.output_references,
        formatter=formatter,
    )


def save_variables_file(
    format: Union[VariableFormat, str],
    dictionary: Dictionary,
    filename: str,
    output_references: Union[bool, OutputReferences] = False,
) -> None:
    """
    Generate variable declarations and save them to a file.

    Args:
        format: Output dialect
        dictionary: Tokens to render
        filename: Output file path (e.g. "_variables.scss")
        output_references: Emit references as live expressions
    """
    text = formatted_variables(format, dictionary, output_references=output_references)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(text + "\n")
    log.info("variables_saved", filename=filename, tokens=len(dictionary.all_properties))


__all__ = ["formatted_variables", "render_with_options", "save_variables_file"]
