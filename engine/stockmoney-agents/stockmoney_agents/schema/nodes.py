"""
stockmoney_agents.schema.nodes

Purpose:
    Declarative response-schema tree sent alongside a prompt so Gemini is constrained
    to emit matching JSON.

Design Notes:
    - One frozen dataclass per node kind (object / array / string / number / enum).
    - Nodes are built once at import time and shared by reference; nothing mutates them.
    - to_gemini() renders the `responseSchema` dialect of the Gemini API
      (upper-case OpenAPI type names).

Created:
    2026-10-12
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union


class SchemaKind(str, Enum):
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"
    STRING = "STRING"
    NUMBER = "NUMBER"


def _with_description(out: Dict[str, Any], description: str | None) -> Dict[str, Any]:
    if description:
        out["description"] = description
    return out


@dataclass(frozen=True)
class StringNode:
    description: str | None = None

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.STRING

    def to_gemini(self) -> Dict[str, Any]:
        return _with_description({"type": self.kind.value}, self.description)


@dataclass(frozen=True)
class NumberNode:
    description: str | None = None

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.NUMBER

    def to_gemini(self) -> Dict[str, Any]:
        return _with_description({"type": self.kind.value}, self.description)


@dataclass(frozen=True)
class EnumNode:
    """A string restricted to a fixed set of literal values."""

    values: Tuple[str, ...]
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("EnumNode requires at least one value")

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.STRING

    def to_gemini(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.kind.value, "enum": list(self.values)}
        return _with_description(out, self.description)


@dataclass(frozen=True)
class ArrayNode:
    items: "SchemaNode"
    description: str | None = None

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.ARRAY

    def to_gemini(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.kind.value, "items": self.items.to_gemini()}
        return _with_description(out, self.description)


@dataclass(frozen=True)
class ObjectNode:
    """
    properties keeps declaration order; required lists property names that must be present.
    """

    properties: Tuple[Tuple[str, "SchemaNode"], ...]
    required: Tuple[str, ...] = ()
    description: str | None = None

    def __post_init__(self) -> None:
        names = [name for name, _ in self.properties]
        if len(set(names)) != len(names):
            raise ValueError(f"ObjectNode has duplicate property names: {names}")
        unknown = [r for r in self.required if r not in names]
        if unknown:
            raise ValueError(f"ObjectNode.required names unknown properties: {unknown}")

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.OBJECT

    def get_property(self, name: str) -> "SchemaNode":
        for prop_name, node in self.properties:
            if prop_name == name:
                return node
        raise KeyError(name)

    def to_gemini(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.kind.value,
            "properties": {name: node.to_gemini() for name, node in self.properties},
        }
        if self.required:
            out["required"] = list(self.required)
        return _with_description(out, self.description)


SchemaNode = Union[StringNode, NumberNode, EnumNode, ArrayNode, ObjectNode]
