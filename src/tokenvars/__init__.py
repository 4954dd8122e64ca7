"""
Token Variables Package

Renders a dictionary of design tokens into variable declarations for
imperative stylesheet languages (CSS custom properties, Sass, Less, Stylus).

ARCHITECTURAL GUARANTEE:
------------------------
This package does NOT:
    - Load or resolve token sources
    - Validate that referenced values are correct
    - Parse the target stylesheet language

Tokens arrive pre-resolved. The package decides declaration ORDER
and hands each token to a line formatter.
"""

__version__ = "0.1.0"
