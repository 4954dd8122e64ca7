#!/usr/bin/env python3
"""
Demo: Render the example palette as variables in every built-in format.

Shows each dialect twice: with resolved values, then with live references.
Log events go to stderr so they never mix with the printed output.
"""

from tokenvars.examples import build_example_dictionary
from tokenvars.backends import VariableFormat, render_with_options, save_variables_file
from tokenvars.logconfig import configure_logging
from tokenvars.options import RenderOptions


def main():
    configure_logging("info")
    dictionary = build_example_dictionary()

    print("=" * 80)
    print("FORMATTED VARIABLES DEMO")
    print("=" * 80)

    for fmt in VariableFormat:
        for output_references in (False, True):
            options = RenderOptions(format=fmt.value, output_references=output_references)
            label = "references" if output_references else "resolved"
            print(f"\n{fmt.value.upper()} ({label}):")
            print("-" * 80)
            print(render_with_options(options, dictionary))

    options = RenderOptions.from_yaml("format: sass\noutput_references: true\n")
    filename = "_variables.scss"
    save_variables_file(options.format, dictionary, filename, output_references=options.output_references)
    print(f"\nSaved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
