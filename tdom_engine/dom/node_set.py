"""
Node set implementation for the tree model.

A NodeSet is the result of a selection and a mutation target in its own
right: every mutation is broadcast to each member. The first member gets
the argument exactly as given, every other member gets an independent
``duplicate()`` of it, so no element ever ends up with two parents.
"""

from typing import Iterable, Iterator, List, Optional, Set, Tuple, TYPE_CHECKING

from .node import MutableNode, Node, NodeType
from .exceptions import NodeSetIndexError

if TYPE_CHECKING:
    from .element import Element
    from ..rendering.visitor import DomVisitor


class NodeSet(MutableNode):
    """Ordered collection of distinct elements, deduplicated by identity."""

    node_type = NodeType.NODE_SET

    def __init__(self, entries: Optional[Iterable['Element']] = None):
        self._entries: List['Element'] = []
        self._ids: Set[int] = set()
        if entries is not None:
            self.extend(entries)

    def add(self, element: 'Element') -> bool:
        """
        Add an element unless it is already present.

        Returns:
            True if the element was added
        """
        if id(element) in self._ids:
            return False
        self._ids.add(id(element))
        self._entries.append(element)
        return True

    def extend(self, elements: Iterable['Element']) -> 'NodeSet':
        for element in elements:
            self.add(element)
        return self

    def entries(self) -> Tuple['Element', ...]:
        return tuple(self._entries)

    def nth(self, index: int) -> 'Element':
        if index < 0 or index >= len(self._entries):
            raise NodeSetIndexError(
                f"Index {index} out of range for a node set of {len(self._entries)}")
        return self._entries[index]

    def last(self) -> 'Element':
        if not self._entries:
            raise NodeSetIndexError("last() called on an empty node set")
        return self._entries[-1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator['Element']:
        return iter(self.entries())

    def __contains__(self, element: object) -> bool:
        return id(element) in self._ids

    def __repr__(self) -> str:
        return f"NodeSet({self._entries!r})"

    # Broadcast mutation

    def _broadcast(self, apply, thing: Optional[Node]) -> None:
        for position, element in enumerate(self.entries()):
            if position == 0 or thing is None:
                apply(element, thing)
            else:
                apply(element, thing.duplicate())

    def insert_at(self, index: Optional[int], thing: Node) -> 'NodeSet':
        self._broadcast(lambda element, d: element.insert_at(index, d), thing)
        return self

    def _before(self, thing: Node) -> None:
        self._broadcast(lambda element, d: element.before(d), thing)

    def _after(self, thing: Node) -> None:
        self._broadcast(lambda element, d: element.after(d), thing)

    def _remove(self, thing: Optional[Node]) -> None:
        self._broadcast(lambda element, d: element.remove(d), thing)

    def duplicate(self) -> 'NodeSet':
        """A node set holding a duplicate of every member, in order."""
        return NodeSet(element.duplicate() for element in self._entries)

    def select(self, selector: str) -> 'NodeSet':
        """Union of selecting from every member, deduplicated, in member order."""
        from .selector_engine import default_engine
        result = NodeSet()
        for element in self.entries():
            result.extend(default_engine.select(selector, element))
        return result

    def visit(self, visitor: 'DomVisitor') -> None:
        visitor.visit_node_set(self)
