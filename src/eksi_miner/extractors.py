"""
Page-level extraction of entries and topics.

Each extractor takes the raw markup of one page and returns the records
found on it, in document order. Missing containers or fields are not
errors: a page without an entry list simply yields no entries, which is
how the pagination loop learns it has run past the last page.
"""

import logging
import re
from typing import List

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .exceptions import ParseError
from .matchers import MATCHERS, Matchers, by_tag
from .models import Entry, Topic
from .tree import attr, find, find_all, text

logger = logging.getLogger(__name__)

BASE_URL = "https://eksisozluk.com"

_list_item = by_tag("li")
_anchor = by_tag("a")
_COUNT = re.compile(r"[0-9]+")


def parse_markup(markup: str) -> BeautifulSoup:
    """Parse a page with lxml, wrapping parser failures in ParseError."""
    try:
        return BeautifulSoup(markup, "lxml")
    except ParserRejectedMarkup as e:
        raise ParseError(f"Could not parse page markup: {e}") from e


def split_id_date(id_date: str):
    """Split the "<id> <date>" permalink text on its first space.

    Example:
        split_id_date("12345 15.03.2020 14:22")
        # Returns: ("12345", "15.03.2020 14:22")
    """
    entry_id, _, date = id_date.partition(" ")
    return entry_id.strip(), date.strip()


def split_title_count(title_and_count: str):
    """Split a topic row "<title> <count>" at its last space.

    A trailing token that is not a plain run of ASCII digits gives a count of 0.

    Example:
        split_title_count("Gündem Başlığı 42")
        # Returns: ("Gündem Başlığı", 42)
    """
    title, separator, count_text = title_and_count.rpartition(" ")
    if not separator:
        return title_and_count.strip(), 0

    count_text = count_text.strip()
    count = int(count_text) if _COUNT.fullmatch(count_text) else 0
    return title.strip(), count


def extract_entries(markup: str, matchers: Matchers = MATCHERS) -> List[Entry]:
    """Extract every entry from a topic page."""
    root = parse_markup(markup)

    entry_list = find(root, matchers.entry_list)
    if entry_list is None:
        return []

    entries = []
    for body in find_all(entry_list, matchers.entry):
        author_node = find(body.parent, matchers.author)
        date_node = find(body.parent, matchers.date)

        entry_id, date = "", ""
        if date_node is not None:
            entry_id, date = split_id_date(text(date_node))

        entries.append(Entry(
            id=entry_id,
            author=text(author_node),
            date=date,
            text=text(body),
        ))

    logger.debug("Extracted %d entries", len(entries))
    return entries


def extract_topics(markup: str, matchers: Matchers = MATCHERS,
                   base_url: str = BASE_URL) -> List[Topic]:
    """Extract every topic row from a listing page (gündem, debe, ...)."""
    root = parse_markup(markup)

    content = find(root, matchers.content)
    topic_list = find(content, matchers.topic_list)
    if topic_list is None:
        return []

    topics = []
    for item in find_all(topic_list, _list_item):
        link = find(item, _anchor)
        title, count = split_title_count(text(item))
        topics.append(Topic(
            title=title,
            link=base_url + attr(link, "href"),
            count=count,
        ))

    logger.debug("Extracted %d topics", len(topics))
    return topics
