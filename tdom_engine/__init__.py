"""
TDom Engine - build, query and mutate markup-like trees in Python.
"""

from tdom_engine.utils.config_manager import get_default_config
from tdom_engine.utils.logging import setup_logging_from_config

# Console level and optional log file come from the default configuration
logger = setup_logging_from_config(get_default_config())

from tdom_engine.dom import (  # noqa: E402
    Node, NodeType, Text, Attr, Element, NodeSet, END,
    SelectorEngine, element, text, attr,
    TDomError, ReparentError, OrphanNodeError, TreeInvariantError,
    SelectorSyntaxError, NoMatchError, NodeSetIndexError,
)
from tdom_engine.rendering import DomVisitor, HTMLRenderer, JSONRenderer  # noqa: E402

# Package information
__version__ = "1.0.0"
__author__ = "TDom Engine Team"
__description__ = "A small in-memory tree model for markup-like documents"

__all__ = [
    'Node', 'NodeType', 'Text', 'Attr', 'Element', 'NodeSet', 'END',
    'SelectorEngine', 'element', 'text', 'attr',
    'TDomError', 'ReparentError', 'OrphanNodeError', 'TreeInvariantError',
    'SelectorSyntaxError', 'NoMatchError', 'NodeSetIndexError',
    'DomVisitor', 'HTMLRenderer', 'JSONRenderer',
]
