import logging

from scrapy import Selector

from .base_scraper import BaseNewsScraper
from .cascades import CONTENT_SELECTORS, first_match
from .models import (
    ARTICLE_ERROR_PLACEHOLDER,
    EMPTY_CONTENT_PLACEHOLDER,
    MAX_CONTENT_LENGTH,
)
from .parser import node_text, normalize_content, parse_html, select


logger = logging.getLogger(__name__)


class ContentExtractor(BaseNewsScraper):
    """
    Fetches one article page and returns a short plain-text excerpt of
    its body. The result is never empty and never longer than
    ``max_content_length``.
    """

    @property
    def content_limit(self) -> int:
        return min(int(self.config["max_content_length"]), MAX_CONTENT_LENGTH)

    def extract(self, url: str) -> str:
        try:
            document = self.fetch_document(url, max_age=self.config["article_max_age"])
            if document is None:
                return ARTICLE_ERROR_PLACEHOLDER
            return self.extract_from_document(document)
        except Exception as e:
            logger.error(f"Error extracting content from {url}: {e}")
            return ARTICLE_ERROR_PLACEHOLDER

    def extract_from_html(self, html: str) -> str:
        """Pure extraction step: same markup in, same excerpt out."""
        return self.extract_from_document(parse_html(html))

    def extract_from_document(self, document: Selector) -> str:
        content = ""
        match = first_match(document, CONTENT_SELECTORS)
        if match:
            logger.debug(f"Content region matched '{match.selector}'")
            content = node_text(match.nodes).strip()

        # No region matched, or the region had no text
        if not content:
            body = select(document, "body") or [document]
            content = node_text(body).strip()

        content = normalize_content(content, self.content_limit)
        return content or EMPTY_CONTENT_PLACEHOLDER
