"""
HTML rendering visitor.
"""

from typing import Iterable, Optional, TYPE_CHECKING

from .visitor import DomVisitor
from .escaping import escape
from ..utils.config_manager import ConfigManager, get_default_config

if TYPE_CHECKING:
    from ..dom.attr import Attr
    from ..dom.element import Element
    from ..dom.text import Text


class HTMLRenderer(DomVisitor):
    """
    Renders a tree as HTML (or XML) text into a sink.

    Elements without children render as ``<tag />`` unless their tag is in
    the never-self-close set, in which case they render as ``<tag></tag>``.
    Attributes render in the element's attribute order.
    """

    def __init__(self, sink, never_self_close: Optional[Iterable[str]] = None,
                 config: Optional[ConfigManager] = None):
        """
        Initialize the renderer.

        Args:
            sink: Object with a ``write(str)`` method; the caller owns it
            never_self_close: Tags that always render as an open/close pair;
                defaults to the ``rendering.never_self_close`` setting
            config: Configuration to read defaults from
        """
        self.sink = sink
        if never_self_close is None:
            config = config or get_default_config()
            never_self_close = config.get("rendering", "never_self_close", [])
        self.never_self_close = frozenset(never_self_close)

    def visit_text(self, text: 'Text') -> None:
        self.sink.write(escape(text.data))

    def visit_attr(self, attr: 'Attr') -> None:
        self.sink.write(attr.name)
        if attr.has_value:
            self.sink.write('="')
            self.sink.write(escape(attr.value, quote=True))
            self.sink.write('"')

    def visit_element(self, element: 'Element') -> None:
        self.sink.write("<")
        self.sink.write(element.tag_name)
        for attr in element.attributes.values():
            self.sink.write(" ")
            attr.visit(self)

        if not element.has_child_nodes():
            if element.tag_name in self.never_self_close:
                self.sink.write(f"></{element.tag_name}>")
            else:
                self.sink.write(" />")
            return

        self.sink.write(">")
        for child in element.child_nodes:
            child.visit(self)
        self.sink.write(f"</{element.tag_name}>")
