"""
JSON rendering visitor.

Elements become ``{"tag": ..., "attributes": {...}, "children": [...]}``
objects, text becomes a string and a node set becomes a list. Attributes
without a value map to ``null``.
"""

import json
from typing import Any, List, Optional, TYPE_CHECKING

from .visitor import DomVisitor

if TYPE_CHECKING:
    from ..dom.attr import Attr
    from ..dom.element import Element
    from ..dom.node_set import NodeSet
    from ..dom.text import Text


class JSONRenderer(DomVisitor):
    """Builds plain Python data for a tree, then serializes it with json."""

    def __init__(self):
        self._stack: List[Any] = [[]]

    def _emit(self, value: Any) -> None:
        top = self._stack[-1]
        if isinstance(top, dict):
            top["children"].append(value)
        else:
            top.append(value)

    def visit_text(self, text: 'Text') -> None:
        self._emit(text.data)

    def visit_attr(self, attr: 'Attr') -> None:
        top = self._stack[-1]
        if isinstance(top, dict):
            top["attributes"][attr.name] = attr.value
        else:
            top.append({attr.name: attr.value})

    def visit_element(self, element: 'Element') -> None:
        data = {"tag": element.tag_name, "attributes": {}, "children": []}
        self._stack.append(data)
        for attr in element.attributes.values():
            attr.visit(self)
        for child in element.child_nodes:
            child.visit(self)
        self._stack.pop()
        self._emit(data)

    def visit_node_set(self, node_set: 'NodeSet') -> None:
        members: List[Any] = []
        self._stack.append(members)
        super().visit_node_set(node_set)
        self._stack.pop()
        self._emit(members)

    @property
    def data(self) -> Any:
        """The rendered value: the single top-level item, or a list of them."""
        rendered = self._stack[0]
        return rendered[0] if len(rendered) == 1 else rendered

    def render(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.data, indent=indent)

    def dump(self, sink, indent: Optional[int] = None) -> None:
        json.dump(self.data, sink, indent=indent)
