"""
Core Token Model Objects

Defines the data structures handed to the variable renderers:
    - Tokens (named design values)
    - Dictionaries (ordered token collections with name lookup)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about CSS/Sass/Less/Stylus syntax
        - Are never mutated by rendering
        - Are fully serializable
        - Represent resolved data, not resolution logic
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Token:
    """
    A single named design value (a color, a spacing step, a font stack).

    Properties:
        name:
            Emitted variable name (e.g., "color-brand")

        value:
            Resolved literal value (e.g., "#ffffff")
            If None: the token has nothing to emit

        path:
            Hierarchical name segments (e.g., ("color", "brand"))

        original_value:
            Unresolved value expression as authored
            Example: "{color.base.value}"

        references:
            Names of the tokens this token's original value embeds
            Empty for literal tokens

        comment:
            Optional human-readable comment carried into the output

        themeable:
            Whether the declaration may be overridden downstream

        attributes:
            Free-form classification (e.g., {"category": "asset"})

    ARCHITECTURAL RULE:
        references are already known when a Token is built.
        Nothing here parses original_value.
    """

    name: str
    value: Any
    path: Tuple[str, ...] = ()
    original_value: Optional[str] = None
    references: Tuple[str, ...] = ()
    comment: Optional[str] = None
    themeable: bool = False
    attributes: Dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_path(cls, path: Sequence[str], value: Any, **kwargs: Any) -> "Token":
        """
        Build a token whose name is its path segments joined by '-'.

        Args:
            path: Name segments, e.g. ["color", "base", "gray"]
            value: Resolved value
            **kwargs: Any other Token field

        Returns:
            Token named e.g. "color-base-gray"
        """
        segments = tuple(path)
        return cls(name="-".join(segments), value=value, path=segments, **kwargs)

    @property
    def reference(self) -> Optional[str]:
        """Name of the first referenced token, or None."""
        return self.references[0] if self.references else None

    @property
    def has_reference(self) -> bool:
        return bool(self.references)


@dataclass
class Dictionary:
    """
    Root container for a set of tokens.

    Properties:
        all_properties:
            Every token, in insertion order
            This order is the fallback emission order

        name:
            Dictionary identifier

        metadata:
            Arbitrary key-value pairs
            Example: {"source": "tokens/color.yaml"}

    INVARIANTS:
        - Token names are unique
        - Renderers only read this object; they never reorder
          all_properties in place
    """

    all_properties: List[Token] = field(default_factory=list)
    name: str = ""
    metadata: Dict[str, str] = field(default_factory=dict)

    def get_token(self, name: str) -> Optional[Token]:
        """
        Retrieve a token by name.

        Args:
            name: Token name

        Returns:
            Token object or None if not found
        """
        for token in self.all_properties:
            if token.name == name:
                return token
        return None

    def uses_reference(self, token: Token) -> bool:
        """True if the token was authored as a reference to other tokens."""
        return token.has_reference

    def get_references(self, token: Token) -> List[Token]:
        """
        Retrieve the tokens referenced by `token`.

        Names with no matching token are skipped.

        Args:
            token: Referencing token

        Returns:
            Referenced tokens, in reference order
        """
        found = []
        for ref_name in token.references:
            ref = self.get_token(ref_name)
            if ref is not None:
                found.append(ref)
        return found
