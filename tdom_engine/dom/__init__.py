"""
Tree model for markup-like documents.
This package provides element/text/attribute nodes, node sets with
broadcast mutation, and the selector engine used to query them.
"""

from .node import Node, NodeType, MutableNode, END
from .text import Text
from .attr import Attr
from .element import Element
from .node_set import NodeSet
from .selector_engine import SelectorEngine, SelectorParser, SimpleSelector, Predicate
from .element_factory import element, text, attr
from .exceptions import (
    TDomError, ReparentError, OrphanNodeError, TreeInvariantError,
    SelectorSyntaxError, NoMatchError, NodeSetIndexError,
)

__all__ = [
    'Node', 'NodeType', 'MutableNode', 'END', 'Text', 'Attr', 'Element', 'NodeSet',
    'SelectorEngine', 'SelectorParser', 'SimpleSelector', 'Predicate',
    'element', 'text', 'attr',
    'TDomError', 'ReparentError', 'OrphanNodeError', 'TreeInvariantError',
    'SelectorSyntaxError', 'NoMatchError', 'NodeSetIndexError',
]
