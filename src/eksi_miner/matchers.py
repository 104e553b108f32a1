"""
Structural matchers for eksisozluk.com markup.

Every piece of site-specific markup knowledge lives here: each matcher
checks whether an ``id`` or ``class`` attribute contains a marker string.
If the site changes its templates, this is the only module to touch.
"""

from dataclasses import dataclass

from .tree import Matcher, attr


def attr_contains(name: str, marker: str) -> Matcher:
    """Build a predicate testing that attribute ``name`` contains ``marker``."""
    def matcher(node) -> bool:
        return marker in attr(node, name)
    return matcher


def by_tag(tag_name: str) -> Matcher:
    """Build a predicate matching elements by tag name."""
    def matcher(node) -> bool:
        return getattr(node, "name", None) == tag_name
    return matcher


@dataclass(frozen=True)
class Matchers:
    """
    The set of predicates the extractors rely on.

    Attributes:
        entry_list: Container holding every entry of a topic page
        entry: Body of a single entry
        author: Author link of an entry
        date: Permalink carrying "<id> <date>" of an entry
        topic_list: List of topics on a listing page
        index_list: Left-hand index section
        content: Main content column of a listing page
    """
    entry_list: Matcher
    entry: Matcher
    author: Matcher
    date: Matcher
    topic_list: Matcher
    index_list: Matcher
    content: Matcher


def build_matchers() -> Matchers:
    return Matchers(
        entry_list=attr_contains("id", "entry-list"),
        entry=attr_contains("class", "content"),
        author=attr_contains("class", "entry-author"),
        date=attr_contains("class", "entry-date"),
        topic_list=attr_contains("class", "topic-list"),
        index_list=attr_contains("id", "index-section"),
        content=attr_contains("id", "content-body"),
    )


# Built once at import time and never modified afterwards
MATCHERS = build_matchers()
