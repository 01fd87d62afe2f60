"""
Node base classes for the tree model.
This module defines the node kinds, the visit/duplicate contract shared by
every node, and the selector-driven mutation helpers shared by elements and
node sets.
"""

import io
import logging
from enum import IntEnum
from typing import Optional, Union, TYPE_CHECKING

from .exceptions import NoMatchError
from ..utils.config_manager import get_default_config

if TYPE_CHECKING:
    from .node_set import NodeSet
    from ..rendering.visitor import DomVisitor

logger = logging.getLogger(__name__)

# Index value meaning "after the last child"
END = None

_UNSET = object()


class NodeType(IntEnum):
    """The closed set of node kinds a visitor has to handle."""
    ELEMENT_NODE = 1
    ATTRIBUTE_NODE = 2
    TEXT_NODE = 3
    NODE_SET = 4


class Node:
    """
    Base class of every node kind.

    Subclasses implement ``visit`` (double dispatch into a DomVisitor) and
    ``duplicate`` (an independent, parent-less copy).
    """

    node_type: NodeType

    def visit(self, visitor: 'DomVisitor') -> None:
        raise NotImplementedError

    def duplicate(self) -> 'Node':
        raise NotImplementedError

    def dump(self, sink, never_self_close=None) -> None:
        """
        Render this node as HTML into the provided sink.

        Args:
            sink: Any object with a ``write(str)`` method
            never_self_close: Optional tag names that must not render as <tag />
        """
        from ..rendering.html_renderer import HTMLRenderer
        self.visit(HTMLRenderer(sink, never_self_close=never_self_close))

    def to_html(self, never_self_close=None) -> str:
        """Render this node as an HTML string."""
        buffer = io.StringIO()
        self.dump(buffer, never_self_close=never_self_close)
        return buffer.getvalue()

    def to_json(self, indent: Optional[int] = None) -> str:
        """Render this node as a JSON string."""
        from ..rendering.json_renderer import JSONRenderer
        renderer = JSONRenderer()
        self.visit(renderer)
        return renderer.render(indent=indent)

    def __str__(self) -> str:
        return self.to_html()


class MutableNode(Node):
    """
    Mutation surface shared by Element and NodeSet.

    Each operation has two forms: ``op(thing)`` applies to the receiver,
    ``op(selector, thing)`` applies to everything the selector matches
    below the receiver. A ``str`` first argument is always a selector.
    """

    def insert_at(self, index: Optional[int], thing: Node) -> 'MutableNode':
        raise NotImplementedError

    def select(self, selector: str) -> 'NodeSet':
        raise NotImplementedError

    def _before(self, thing: Node) -> None:
        raise NotImplementedError

    def _after(self, thing: Node) -> None:
        raise NotImplementedError

    def _remove(self, thing: Optional[Node]) -> None:
        raise NotImplementedError

    def append(self, target: Union[str, Node], thing: Node = _UNSET,
               required: Optional[bool] = None) -> 'MutableNode':
        """
        Add ``thing`` after the last child (attributes go to the attribute map).

        ``append(selector, thing)`` appends to every node the selector matches.
        """
        if thing is _UNSET:
            return self.insert_at(END, target)
        return self._on_selection(target, "append", thing, required)

    def prepend(self, target: Union[str, Node], thing: Node = _UNSET,
                required: Optional[bool] = None) -> 'MutableNode':
        """Add ``thing`` before the first child, or before the first child of every match."""
        if thing is _UNSET:
            return self.insert_at(0, target)
        return self._on_selection(target, "prepend", thing, required)

    def before(self, target: Union[str, Node], thing: Node = _UNSET,
               required: Optional[bool] = None) -> 'MutableNode':
        """Insert ``thing`` as the sibling just before this node (or every match)."""
        if thing is _UNSET:
            self._before(target)
            return self
        return self._on_selection(target, "before", thing, required)

    def after(self, target: Union[str, Node], thing: Node = _UNSET,
              required: Optional[bool] = None) -> 'MutableNode':
        """Insert ``thing`` as the sibling just after this node (or every match)."""
        if thing is _UNSET:
            self._after(target)
            return self
        return self._on_selection(target, "after", thing, required)

    def remove(self, thing: Union[str, Node, None] = None,
               required: Optional[bool] = None) -> 'MutableNode':
        """
        Remove things from the tree.

        - ``remove()`` detaches this node from its parent.
        - ``remove(selector)`` detaches every node the selector matches.
        - ``remove(attr)`` deletes the attribute with that name.
        - ``remove(node)`` / ``remove(node_set)`` removes those children.
        """
        if isinstance(thing, str):
            matches = self._require_selection(thing, required)
            matches.remove()
            return self
        self._remove(thing)
        return self

    def _on_selection(self, selector: str, operation: str, thing: Node,
                      required: Optional[bool]) -> 'MutableNode':
        if not isinstance(selector, str):
            raise TypeError(f"Expected a selector string, got {type(selector).__name__}")
        matches = self._require_selection(selector, required)
        getattr(matches, operation)(thing)
        return self

    def _require_selection(self, selector: str, required: Optional[bool]) -> 'NodeSet':
        matches = self.select(selector)
        if required is None:
            required = get_default_config().get("selectors", "require_match", False)
        if required and len(matches) == 0:
            logger.warning(f"Required selector {selector!r} matched nothing")
            raise NoMatchError(selector, getattr(self, "tag_name", None))
        return matches
