"""
Selector engine implementation.
This module parses selector strings into simple-selector stages and
evaluates them against element subtrees.

Grammar: one or more whitespace-separated simple selectors, each stage
searched in the full subtree of every match of the previous stage. A simple
selector is an optional tag name followed by at most one of::

    .CLASS            class attribute contains CLASS as a space-delimited token
    #ID               id attribute contains ID as a space-delimited token
    [ATTR]            attribute is present, with or without a value
    [ATTR='VALUE']    attribute value equals VALUE
    [ATTR=~'VALUE']   attribute value contains VALUE as a space-delimited token

Ids are matched with the same token rule as classes, so ``#b`` matches
``id="a b"``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

import cssselect
from cssselect.parser import tokenize

from .element import Element
from .node_set import NodeSet
from .exceptions import SelectorSyntaxError

logger = logging.getLogger(__name__)

TOKEN_DELIMITER = " "


class Predicate(Enum):
    """What a simple selector checks beyond the tag name."""
    NONE = "none"
    CLASS = "class"
    ID = "id"
    ATTR_PRESENT = "attr-present"
    ATTR_EQUALS = "attr-equals"
    ATTR_CONTAINS_TOKEN = "attr-contains-token"


def contains_token(value: Optional[str], token: str, delimiter: str = TOKEN_DELIMITER) -> bool:
    """
    Check whether ``token`` occurs in ``value`` bounded by the delimiter or the string edges.

    The token may itself contain the delimiter, so ``"footer copyright"``
    is found in ``"footer copyright small"``.

    >>> contains_token("footer copyright small", "copyright")
    True
    >>> contains_token("copyrighted", "copyright")
    False
    """
    if value is None or not token:
        return False
    return f"{delimiter}{token}{delimiter}" in f"{delimiter}{value}{delimiter}"


@dataclass(frozen=True)
class SimpleSelector:
    """One whitespace-free selector stage: optional tag plus one predicate."""

    tag: Optional[str] = None
    predicate: Predicate = Predicate.NONE
    name: Optional[str] = None
    value: Optional[str] = None

    def matches(self, element: Element) -> bool:
        if self.tag is not None and element.tag_name != self.tag:
            return False

        if self.predicate is Predicate.NONE:
            return True
        if self.predicate is Predicate.ATTR_PRESENT:
            return element.has_attribute(self.name)

        actual = element.get_attribute(self.name)
        if self.predicate is Predicate.ATTR_EQUALS:
            return actual is not None and actual == self.value
        # CLASS, ID and ATTR_CONTAINS_TOKEN share the token-boundary rule
        return contains_token(actual, self.value)

    def __str__(self) -> str:
        tag = self.tag or ""
        if self.predicate is Predicate.CLASS:
            return f"{tag}.{self.value}"
        if self.predicate is Predicate.ID:
            return f"{tag}#{self.value}"
        if self.predicate is Predicate.ATTR_PRESENT:
            return f"{tag}[{self.name}]"
        if self.predicate is Predicate.ATTR_EQUALS:
            return f"{tag}[{self.name}='{self.value}']"
        if self.predicate is Predicate.ATTR_CONTAINS_TOKEN:
            return f"{tag}[{self.name}=~'{self.value}']"
        return tag


class SelectorParser:
    """
    Turns a selector string into a tuple of SimpleSelector stages.

    Tokenizing is delegated to cssselect; this class only assembles the
    tokens of this selector language.
    """

    def parse(self, selector: str) -> Tuple[SimpleSelector, ...]:
        if not isinstance(selector, str):
            raise TypeError(f"Selector must be a string, got {type(selector).__name__}")

        try:
            tokens = [token for token in tokenize(selector) if token.type != 'EOF']
        except cssselect.SelectorSyntaxError as e:
            raise SelectorSyntaxError(selector, str(e)) from e

        stages = []
        for group in self._split_on_whitespace(tokens):
            stages.append(self._parse_simple(selector, group))

        if not stages:
            raise SelectorSyntaxError(selector, "empty selector")
        return tuple(stages)

    def _split_on_whitespace(self, tokens) -> List[list]:
        groups: List[list] = [[]]
        for token in tokens:
            if token.type == 'S':
                if groups[-1]:
                    groups.append([])
            else:
                groups[-1].append(token)
        return [group for group in groups if group]

    def _parse_simple(self, selector: str, tokens: list) -> SimpleSelector:
        pos = 0
        tag = None
        if tokens[pos].type == 'IDENT':
            tag, pos = self._read_name(selector, tokens, pos)

        if pos == len(tokens):
            return SimpleSelector(tag=tag)

        token = tokens[pos]
        if token.type == 'HASH':
            result = SimpleSelector(tag, Predicate.ID, 'id', token.value)
            pos += 1
        elif token.is_delim('.'):
            pos += 1
            if pos >= len(tokens) or tokens[pos].type != 'IDENT':
                raise self._error(selector, tokens, pos, "expected a class name after '.'")
            result = SimpleSelector(tag, Predicate.CLASS, 'class', tokens[pos].value)
            pos += 1
        elif token.is_delim('['):
            result, pos = self._parse_attribute(selector, tokens, pos + 1, tag)
        else:
            raise self._error(selector, tokens, pos, "expected a tag, '.', '#' or '['")

        if pos != len(tokens):
            raise self._error(selector, tokens, pos, "unexpected trailing input")
        return result

    def _parse_attribute(self, selector: str, tokens: list, pos: int,
                         tag: Optional[str]) -> Tuple[SimpleSelector, int]:
        if pos >= len(tokens) or tokens[pos].type != 'IDENT':
            raise self._error(selector, tokens, pos, "expected an attribute name after '['")
        name, pos = self._read_name(selector, tokens, pos)

        if pos < len(tokens) and tokens[pos].is_delim(']'):
            return SimpleSelector(tag, Predicate.ATTR_PRESENT, name), pos + 1

        if pos >= len(tokens) or not tokens[pos].is_delim('='):
            raise self._error(selector, tokens, pos, "expected ']', '=' or '=~'")
        pos += 1

        predicate = Predicate.ATTR_EQUALS
        if pos < len(tokens) and tokens[pos].is_delim('~'):
            predicate = Predicate.ATTR_CONTAINS_TOKEN
            pos += 1

        if pos >= len(tokens) or tokens[pos].type not in ('STRING', 'IDENT', 'NUMBER'):
            raise self._error(selector, tokens, pos, "expected an attribute value")
        value = tokens[pos].value
        pos += 1

        if pos >= len(tokens) or not tokens[pos].is_delim(']'):
            raise self._error(selector, tokens, pos, "expected ']'")
        return SimpleSelector(tag, predicate, name, value), pos + 1

    def _read_name(self, selector: str, tokens: list, pos: int) -> Tuple[str, int]:
        # Names may be prefixed, e.g. xsl:template or xml:lang
        parts = [tokens[pos].value]
        pos += 1
        while (pos + 1 < len(tokens) and tokens[pos].is_delim(':')
               and tokens[pos + 1].type == 'IDENT'):
            parts.append(tokens[pos + 1].value)
            pos += 2
        return ":".join(parts), pos

    def _error(self, selector: str, tokens: list, pos: int, reason: str) -> SelectorSyntaxError:
        if pos < len(tokens):
            reason = f"{reason} at position {tokens[pos].pos}"
        else:
            reason = f"{reason} at end of input"
        return SelectorSyntaxError(selector, reason)


class SelectorEngine:
    """
    Selector engine for tree queries.

    Parsed selectors are cached per engine; matching walks each subtree in
    document order (pre-order, left to right), testing the subtree root too.
    """

    def __init__(self):
        self.parser = SelectorParser()
        self._selector_cache: Dict[str, Tuple[SimpleSelector, ...]] = {}

    def parse(self, selector: str) -> Tuple[SimpleSelector, ...]:
        """
        Get the parsed stages of a selector, using the cache if available.

        Raises:
            SelectorSyntaxError: If the selector cannot be parsed
        """
        stages = self._selector_cache.get(selector)
        if stages is None:
            stages = self.parser.parse(selector)
            self._selector_cache[selector] = stages
            logger.debug(f"Parsed selector {selector!r} into {len(stages)} stage(s)")
        else:
            logger.debug(f"Using cached selector {selector!r}")
        return stages

    def select(self, selector: str, root: Element) -> NodeSet:
        """
        Find all elements matching a selector.

        Args:
            selector: The selector string
            root: The element whose subtree (itself included) is searched

        Returns:
            NodeSet of matching elements in document order
        """
        current = NodeSet([root])
        for stage in self.parse(selector):
            found = NodeSet()
            for element in current:
                self._collect(stage, element, found)
            current = found
        return current

    def matches(self, element: Element, selector: str) -> bool:
        """
        Check if an element matches a selector.

        The selector is evaluated from the element's topmost ancestor, so
        descendant stages are checked against the element's real context.
        """
        root = element
        while root.parent_node is not None:
            root = root.parent_node
        return element in self.select(selector, root)

    def clear_cache(self) -> None:
        self._selector_cache.clear()

    def _collect(self, stage: SimpleSelector, element: Element, found: NodeSet) -> None:
        if stage.matches(element):
            found.add(element)
        for child in element.children:
            self._collect(stage, child, found)


default_engine = SelectorEngine()
