"""
Small traversal helpers over BeautifulSoup trees.

The extractors work with plain predicates ("matchers") instead of CSS
selectors, so they need a handful of primitives that accept ``None`` and
text nodes without blowing up:

- attr: read an attribute as a single string
- text: collect the visible text below a node
- find: first matching element, depth-first, node itself included
- find_all: every matching element, without descending into matches
"""

from typing import Callable, List, Optional

from bs4 import Tag

Matcher = Callable[[Optional[Tag]], bool]


def attr(node, name: str) -> str:
    """Return attribute ``name`` of ``node`` or an empty string.

    Multi-valued attributes such as ``class`` come back from BeautifulSoup
    as lists; they are joined with single spaces.
    """
    if not isinstance(node, Tag):
        return ""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def text(node) -> str:
    """Return every text fragment below ``node``, stripped and space-joined."""
    if node is None:
        return ""
    if not isinstance(node, Tag):
        return str(node).strip()
    return " ".join(node.stripped_strings)


def _element_children(node: Tag) -> List[Tag]:
    return [child for child in node.children if isinstance(child, Tag)]


def find(node, matcher: Matcher) -> Optional[Tag]:
    """Depth-first search for the first element satisfying ``matcher``."""
    if not isinstance(node, Tag):
        return None

    stack = [node]
    while stack:
        current = stack.pop()
        if matcher(current):
            return current
        # Reversed so the leftmost child is visited first
        stack.extend(reversed(_element_children(current)))
    return None


def find_all(node, matcher: Matcher) -> List[Tag]:
    """Collect matching elements in document order.

    Once a node matches, its subtree is not searched any further.
    """
    if not isinstance(node, Tag):
        return []

    matched = []
    stack = [node]
    while stack:
        current = stack.pop()
        if matcher(current):
            matched.append(current)
            continue
        stack.extend(reversed(_element_children(current)))
    return matched
