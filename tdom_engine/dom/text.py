"""
Text node implementation for the tree model.
"""

from typing import Any, TYPE_CHECKING

from .node import Node, NodeType

if TYPE_CHECKING:
    from ..rendering.visitor import DomVisitor


class Text(Node):
    """
    Immutable text leaf.

    Text is never mutated and carries no parent pointer, so one instance
    may safely appear in several places and ``duplicate`` returns itself.
    """

    node_type = NodeType.TEXT_NODE

    def __init__(self, value: Any):
        """
        Initialize a text node.

        Args:
            value: Any object; its ``str()`` becomes the text
        """
        self._data = value if isinstance(value, str) else str(value)

    @property
    def data(self) -> str:
        return self._data

    @property
    def text_content(self) -> str:
        return self._data

    def visit(self, visitor: 'DomVisitor') -> None:
        visitor.visit_text(self)

    def duplicate(self) -> 'Text':
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((Text, self._data))

    def __repr__(self) -> str:
        return f"Text({self._data!r})"
