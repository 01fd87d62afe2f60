"""
Visitor interface for rendering trees.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..dom.attr import Attr
    from ..dom.element import Element
    from ..dom.node_set import NodeSet
    from ..dom.text import Text


class DomVisitor:
    """
    Double-dispatch interface over the four node kinds.

    ``node.visit(visitor)`` calls back the method for that node's kind.
    Nothing recurses automatically: ``visit_element`` decides whether and
    how to visit the element's attributes and children, which lets a
    renderer truncate or transform parts of the tree.
    """

    def visit_text(self, text: 'Text') -> None:
        raise NotImplementedError

    def visit_attr(self, attr: 'Attr') -> None:
        raise NotImplementedError

    def visit_element(self, element: 'Element') -> None:
        raise NotImplementedError

    def visit_node_set(self, node_set: 'NodeSet') -> None:
        """Visit each member in order; a node set adds no markup of its own."""
        for element in node_set.entries():
            element.visit(self)
