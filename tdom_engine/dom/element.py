"""
Element implementation for the tree model.
This module implements named element nodes: attribute storage, the ordered
child sequence, single-parent ownership and the mutation primitives.
"""

from typing import Dict, List, Optional, Tuple, Union, TYPE_CHECKING

from .node import MutableNode, Node, NodeType, END
from .attr import Attr
from .text import Text
from .exceptions import ReparentError, OrphanNodeError, TreeInvariantError

if TYPE_CHECKING:
    from .node_set import NodeSet
    from ..rendering.visitor import DomVisitor

ChildNode = Union['Element', Text]


class Element(MutableNode):
    """
    Element node implementation.

    An element owns its attributes (keyed by lower-cased name) and an
    ordered sequence of Text and Element children. An element has at most
    one parent at a time: inserting an element that already has a parent
    raises ReparentError, the caller has to ``remove()`` or ``duplicate()``
    it first.
    """

    node_type = NodeType.ELEMENT_NODE

    def __init__(self, tag_name: str, *children: Node):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag; any string is accepted
            *children: Text, Attr, Element or NodeSet instances to append
        """
        if not isinstance(tag_name, str):
            raise TypeError(f"Tag name must be a string, got {type(tag_name).__name__}")
        self.tag_name = tag_name
        self.attributes: Dict[str, Attr] = {}
        self._child_nodes: List[ChildNode] = []
        self._parent_node: Optional['Element'] = None

        for child in children:
            self.insert_at(END, child)

    @property
    def parent_node(self) -> Optional['Element']:
        """The element owning this one, or None."""
        return self._parent_node

    @property
    def child_nodes(self) -> Tuple[ChildNode, ...]:
        return tuple(self._child_nodes)

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self._child_nodes if isinstance(child, Element)]

    def has_child_nodes(self) -> bool:
        return len(self._child_nodes) > 0

    @property
    def text_content(self) -> str:
        """Concatenated text of every descendant text node, in document order."""
        return "".join(child.text_content for child in self._child_nodes)

    # Attributes

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self.attributes

    def get_attribute_node(self, name: str) -> Optional[Attr]:
        return self.attributes.get(name.lower())

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Returns None both when the attribute is missing and when it has no
        value; use ``has_attribute`` to tell the two apart.
        """
        attr = self.get_attribute_node(name)
        return attr.value if attr is not None else None

    @property
    def id(self) -> str:
        return self.get_attribute('id') or ""

    @property
    def class_name(self) -> str:
        return self.get_attribute('class') or ""

    # Mutation primitives

    def insert_at(self, index: Optional[int], thing: Node) -> 'Element':
        """
        Insert the provided thing at the desired index.

        Attributes are installed in the attribute map (replacing any
        attribute with the same case-insensitive name) and never become
        children. Node sets are unrolled, their entries landing in order
        starting at ``index``.

        Args:
            index: Position in the child sequence; None or a negative index appends
            thing: Text, Attr, Element or NodeSet

        Returns:
            This element

        Raises:
            ReparentError: If ``thing`` is an element that already has a parent
            TreeInvariantError: If ``thing`` is this element or one of its ancestors
        """
        from .node_set import NodeSet

        if isinstance(thing, Attr):
            self.attributes[thing.key] = thing
            return self

        if isinstance(thing, NodeSet):
            position = index
            for entry in thing.entries():
                self.insert_at(position, entry)
                if position is not None and position >= 0:
                    position += 1
            return self

        if isinstance(thing, Element):
            self._check_not_within(thing)
            thing._set_parent(self)
        elif not isinstance(thing, Text):
            raise TypeError(
                f"Cannot insert {type(thing).__name__} into <{self.tag_name}>; "
                f"expected Text, Attr, Element or NodeSet")

        if index is None or index < 0:
            self._child_nodes.append(thing)
        else:
            self._child_nodes.insert(index, thing)
        return self

    def _check_not_within(self, thing: 'Element') -> None:
        node = self
        while node is not None:
            if node is thing:
                raise TreeInvariantError(
                    f"Cannot insert <{thing.tag_name}> into its own subtree")
            node = node._parent_node

    def _set_parent(self, parent: 'Element') -> None:
        if self._parent_node is not None:
            raise ReparentError(f"Cannot reparent <{self.tag_name}>")
        self._parent_node = parent

    def _require_parent(self) -> 'Element':
        if self._parent_node is None:
            raise OrphanNodeError(f"No parent for <{self.tag_name}>")
        return self._parent_node

    def _position_in_parent(self, parent: 'Element') -> int:
        siblings = parent._child_nodes
        for i in range(len(siblings) - 1, -1, -1):
            if siblings[i] is self:
                return i
        raise TreeInvariantError(
            f"<{parent.tag_name}> does not contain its child <{self.tag_name}>")

    def _before(self, thing: Node) -> None:
        parent = self._require_parent()
        parent.insert_at(self._position_in_parent(parent), thing)

    def _after(self, thing: Node) -> None:
        parent = self._require_parent()
        position = self._position_in_parent(parent)
        if position == len(parent._child_nodes) - 1:
            parent.insert_at(END, thing)
        else:
            parent.insert_at(position + 1, thing)

    def _remove(self, thing: Optional[Node]) -> None:
        from .node_set import NodeSet

        if thing is None:
            if self._parent_node is not None:
                self._parent_node._remove_child(self)
        elif isinstance(thing, Attr):
            self.attributes.pop(thing.key, None)
        elif isinstance(thing, NodeSet):
            for entry in thing.entries():
                self._remove_child(entry)
        else:
            self._remove_child(thing)

    def _remove_child(self, child: Node) -> None:
        for i, candidate in enumerate(self._child_nodes):
            if candidate is child:
                del self._child_nodes[i]
                if isinstance(child, Element):
                    child._parent_node = None
                return

    def duplicate(self) -> 'Element':
        """
        Deep copy this element.

        Returns:
            A new parent-less element with the same tag, attributes and
            independently duplicated children
        """
        copy = Element(self.tag_name)
        for attr in self.attributes.values():
            copy.insert_at(END, attr.duplicate())
        for child in self._child_nodes:
            copy.insert_at(END, child.duplicate())
        return copy

    # Selection

    def select(self, selector: str) -> 'NodeSet':
        """
        Find every element in this subtree (this element included) matching a selector.

        Args:
            selector: Selector string, e.g. ``"div.content a[href]"``

        Returns:
            NodeSet of matches in document order
        """
        from .selector_engine import default_engine
        return default_engine.select(selector, self)

    def matches(self, selector: str) -> bool:
        """Check whether selecting from this element's topmost ancestor would return it."""
        from .selector_engine import default_engine
        return default_engine.matches(self, selector)

    def visit(self, visitor: 'DomVisitor') -> None:
        visitor.visit_element(self)

    def __repr__(self) -> str:
        attrs = "".join(f" {attr.name}" if attr.value is None else f' {attr.name}="{attr.value}"'
                        for attr in self.attributes.values())
        return f"<{self.tag_name}{attrs}>"
