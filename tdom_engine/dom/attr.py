"""
Attr implementation for the tree model.
"""

from typing import Any, Optional, TYPE_CHECKING

from .node import Node, NodeType

if TYPE_CHECKING:
    from ..rendering.visitor import DomVisitor


class Attr(Node):
    """
    Immutable (name, value) pair.

    The value may be absent (``None``) for boolean-style attributes such as
    ``disabled``. Elements key their attributes by the lower-cased name.
    """

    node_type = NodeType.ATTRIBUTE_NODE

    def __init__(self, name: str, value: Any = None):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name, kept with its original case for rendering
            value: Any object (stored as its ``str()``), or None for no value
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Attribute name must be a non-empty string, got {name!r}")
        self._name = name
        if value is None or isinstance(value, str):
            self._value = value
        else:
            self._value = str(value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        """The lower-cased name under which elements store this attribute."""
        return self._name.lower()

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def has_value(self) -> bool:
        return self._value is not None

    def visit(self, visitor: 'DomVisitor') -> None:
        visitor.visit_attr(self)

    def duplicate(self) -> 'Attr':
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    def __hash__(self) -> int:
        return hash((Attr, self._name, self._value))

    def __repr__(self) -> str:
        return f"Attr({self._name!r}, {self._value!r})"
