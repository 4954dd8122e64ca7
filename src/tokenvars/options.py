"""
Render configuration.

Options are plain enums and dataclasses handed to the renderers.
They can be built in code, from a dict, or from a YAML mapping:

    format: sass
    output_references: true
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

import yaml


class OutputReferences(Enum):
    """Whether references are emitted as live expressions."""
    ENABLED = "enabled"    # Reorder by reference, emit live references
    DISABLED = "disabled"  # Keep original order, emit resolved literals

    @classmethod
    def coerce(cls, value: Union[bool, str, "OutputReferences"]) -> "OutputReferences":
        """Accept a bool, a member, or a member value ("enabled"/"disabled")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.ENABLED if value else cls.DISABLED
        if isinstance(value, str):
            return cls(value.lower())
        raise TypeError(f"Cannot interpret {value!r} as OutputReferences")

    def __bool__(self) -> bool:
        return self is OutputReferences.ENABLED


@dataclass
class RenderOptions:
    """
    Options for a single variables render.

    Properties:
        format: Output dialect name ("css", "sass", "less", "stylus", ...)
        output_references: Whether to emit references as live expressions
    """

    format: str = "css"
    output_references: OutputReferences = OutputReferences.DISABLED

    def __post_init__(self) -> None:
        self.output_references = OutputReferences.coerce(self.output_references)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RenderOptions":
        unknown = set(d) - {"format", "output_references"}
        if unknown:
            raise ValueError(f"Unknown render options: {sorted(unknown)}")
        return cls(
            format=d.get("format", "css"),
            output_references=d.get("output_references", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": self.format,
            "output_references": bool(self.output_references),
        }

    @classmethod
    def from_yaml(cls, text: str) -> "RenderOptions":
        d = yaml.safe_load(text)
        if d is None:
            return cls()
        if not isinstance(d, dict):
            raise ValueError("Render options must be a YAML mapping")
        return cls.from_dict(d)


__all__ = ["OutputReferences", "RenderOptions"]
