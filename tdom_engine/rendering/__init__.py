"""
Renderers for the tree model.
Every renderer is a DomVisitor; HTMLRenderer is the one used by
``Node.dump`` and ``Node.to_html``.
"""

from .visitor import DomVisitor
from .escaping import escape
from .html_renderer import HTMLRenderer
from .json_renderer import JSONRenderer

__all__ = ['DomVisitor', 'escape', 'HTMLRenderer', 'JSONRenderer']
