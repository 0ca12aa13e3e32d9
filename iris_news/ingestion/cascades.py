"""
Selector cascades: ordered CSS patterns, each a guess at how the target
site marks up its content. The first pattern with at least one match
wins and later patterns are never evaluated.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from scrapy import Selector

from .parser import select


LINK_SELECTORS = (
    'a[href*="/news/"]',
    ".news-item a",
    ".article-title a",
    ".post-title a",
    "h2 a",
    "h3 a",
)

CONTENT_SELECTORS = (
    "article",
    ".article-content",
    ".post-content",
    ".entry-content",
    "main",
    ".content",
    "#content",
)


@dataclass(frozen=True)
class CascadeMatch:
    selector: str
    nodes: List[Selector]


def first_match(document: Selector, cascade: Sequence[str]) -> Optional[CascadeMatch]:
    """Evaluate ``cascade`` in order and return the first non-empty match."""
    for selector in cascade:
        nodes = select(document, selector)
        if nodes:
            return CascadeMatch(selector=selector, nodes=nodes)
    return None
