"""
Exceptions raised by the tree model and the selector engine.
"""


class TDomError(Exception):
    """Base class for every error raised by the tree engine."""


class ReparentError(TDomError, ValueError):
    """An element that already has a parent was inserted somewhere."""


class OrphanNodeError(TDomError, ValueError):
    """A sibling operation (before/after) was called on an unparented element."""


class TreeInvariantError(TDomError, RuntimeError):
    """The tree is corrupted: a parent does not list one of its children."""


class SelectorSyntaxError(TDomError, ValueError):
    """A selector string could not be parsed."""

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        self.reason = reason
        super().__init__(f"Invalid selector {selector!r}: {reason}")


class NoMatchError(TDomError, LookupError):
    """A selector required to match at least one node matched nothing."""

    def __init__(self, selector: str, tag_name: str = None):
        self.selector = selector
        where = f" under <{tag_name}>" if tag_name is not None else ""
        super().__init__(f"No node matched {selector!r}{where}")


class NodeSetIndexError(TDomError, IndexError):
    """Positional access past the end of a node set."""
