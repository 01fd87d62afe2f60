"""
Construction helpers for building trees succinctly.

    page = element("html",
                   element("head", element("title", text("A title"))),
                   element("body",
                           element("div", attr("class", "content"),
                                   text("Hello, world."))))
"""

from typing import Any

from .attr import Attr
from .element import Element
from .node import Node
from .text import Text


def element(tag_name: str, *extra: Node) -> Element:
    """
    Create a new element with the given tag.

    Args:
        tag_name: The tag name; not interpreted, so XML vocabularies work too
        *extra: Text, Attr, Element or NodeSet instances appended in order

    Returns:
        A parent-less Element
    """
    return Element(tag_name, *extra)


def text(value: Any) -> Text:
    """Create a text node holding ``str(value)``."""
    return Text(value)


def attr(name: str, value: Any = None) -> Attr:
    """Create an attribute; leave ``value`` out for a boolean attribute."""
    return Attr(name, value)
