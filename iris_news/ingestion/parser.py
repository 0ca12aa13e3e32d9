import re
from typing import List, Optional
from urllib.parse import urlparse

from scrapy import Selector


# Text under these elements is never rendered
VISIBLE_TEXT_XPATH = (
    ".//text()[not(ancestor::script) and not(ancestor::style)"
    " and not(ancestor::noscript) and not(ancestor::template)]"
)

_WHITESPACE_RUN = re.compile(r"\s+")
_BLANK_LINE_RUN = re.compile(r"\n\s*\n")


def parse_html(html: str) -> Selector:
    """Parse raw markup into a queryable document."""
    return Selector(text=html or "", type="html")


def select(document: Selector, pattern: str) -> List[Selector]:
    """Return the nodes matching a CSS pattern, in document order."""
    return list(document.css(pattern))


def node_text(nodes) -> str:
    """
    Concatenated visible text of one node or a list of nodes.
    Text inside script/style/noscript/template elements is skipped.
    """
    if isinstance(nodes, Selector):
        nodes = [nodes]
    return "".join(
        text for node in nodes for text in node.xpath(VISIBLE_TEXT_XPATH).getall()
    )


def node_attr(node: Selector, name: str) -> Optional[str]:
    return node.attrib.get(name)


def resolve_url(href: str, base_url: str) -> str:
    """
    Resolve an href found on the listing page.

    Hrefs starting with ``/`` are appended verbatim to the origin in
    ``base_url``. Hrefs carrying a scheme pass through unchanged,
    anything else is returned as-is.
    """
    if href.startswith("/"):
        return base_url.rstrip("/") + href
    return href


def normalize_content(text: str, limit: int) -> str:
    """Collapse whitespace runs and blank-line runs, then truncate."""
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _BLANK_LINE_RUN.sub("\n", text)
    return text[:limit]


def extract_domain(url: str) -> str:
    """Domain of a URL without its leading ``www.``, used in log lines."""
    netloc = urlparse(url).netloc
    return re.sub(r"^www\.", "", netloc)
