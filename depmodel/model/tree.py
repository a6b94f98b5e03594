"""Format-agnostic declarative configuration tree.

Readers for concrete syntaxes (Kotlin DSL scripts, JSON documents) produce a
tree of these nodes, and the collector consumes it. ``MapNode`` keeps entry
order and allows repeated keys, so repeated blocks such as several
``modImplementation(...)`` calls survive as separate entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

ScalarValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class Scalar:
    """Leaf value."""

    value: ScalarValue = None

    @property
    def text(self) -> Optional[str]:
        """Value rendered as a string, or None for a null scalar."""
        if self.value is None:
            return None
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)


@dataclass(frozen=True)
class ListNode:
    """Ordered sequence of nodes."""

    items: Tuple["Node", ...] = ()

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class MapNode:
    """Ordered key/node entries; keys may repeat."""

    entries: Tuple[Tuple[str, "Node"], ...] = ()

    def __iter__(self) -> Iterator[Tuple[str, "Node"]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key, _ in self.entries)

    def get(self, key: str) -> Optional["Node"]:
        """Return the first node stored under ``key``."""
        for entry_key, node in self.entries:
            if entry_key == key:
                return node
        return None

    def get_all(self, key: str) -> Tuple["Node", ...]:
        return tuple(node for entry_key, node in self.entries if entry_key == key)

    def get_text(self, *keys: str) -> Optional[str]:
        """Return the text of the first scalar found under any of ``keys``."""
        for key in keys:
            node = self.get(key)
            if isinstance(node, Scalar) and node.value is not None:
                return node.text
        return None


@dataclass(frozen=True)
class OpaqueNode:
    """Shape the tree model does not interpret, kept verbatim."""

    raw: Any = None
    source: Optional[str] = None


Node = Union[Scalar, ListNode, MapNode, OpaqueNode]


def from_python(data: Any) -> Node:
    """Convert plain Python data into a tree.

    Dicts become MapNodes, lists and tuples become ListNodes, and str,
    int, float, bool and None become Scalars. Existing nodes pass through
    unchanged; anything else is wrapped in an OpaqueNode.
    """
    if isinstance(data, (Scalar, ListNode, MapNode, OpaqueNode)):
        return data
    if data is None or isinstance(data, (str, int, float, bool)):
        return Scalar(data)
    if isinstance(data, dict):
        return MapNode(tuple((str(key), from_python(value)) for key, value in data.items()))
    if isinstance(data, (list, tuple)):
        return ListNode(tuple(from_python(item) for item in data))
    return OpaqueNode(raw=data)


def to_python(node: Node) -> Any:
    """Convert a tree back into plain data for export.

    Repeated MapNode keys are folded into a list under that key. Opaque
    nodes export their source text when known, else ``repr`` of the raw value.
    """
    if isinstance(node, Scalar):
        return node.value
    if isinstance(node, ListNode):
        return [to_python(item) for item in node.items]
    if isinstance(node, MapNode):
        grouped: Dict[str, List[Any]] = {}
        for key, child in node.entries:
            grouped.setdefault(key, []).append(to_python(child))
        return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}
    if node.source is not None:
        return node.source
    return repr(node.raw)


__all__ = [
    "Scalar",
    "ListNode",
    "MapNode",
    "OpaqueNode",
    "Node",
    "from_python",
    "to_python",
]
