import logging
from typing import Any, Dict, List, Optional, Tuple

from scrapy import Selector

from .base_scraper import BaseNewsScraper
from .cascades import LINK_SELECTORS, first_match
from .extractor import ContentExtractor
from .fetcher import HTMLFetcher
from .models import CandidateLink, FETCHING_PLACEHOLDER, NewsItem
from .parser import extract_domain, node_attr, node_text, resolve_url, select


logger = logging.getLogger(__name__)


class LinkDiscoverer(BaseNewsScraper):
    """
    Entry point of the pipeline.

    Fetches the listing page, picks at most ``max_links`` article links
    with the link cascade, then runs the content extractor on each of
    them one after the other. A listing page that cannot be fetched
    yields a single failure sentinel item instead of an empty list.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        fetcher: Optional[HTMLFetcher] = None,
        extractor: Optional[ContentExtractor] = None,
    ):
        super().__init__(config, fetcher)
        self.extractor = extractor or ContentExtractor(self.config, self.fetcher)

    @property
    def max_links(self) -> int:
        return int(self.config["max_links"])

    def discover(self, listing_url: Optional[str] = None) -> List[NewsItem]:
        listing_url = listing_url or self.config["listing_url"]
        try:
            document = self.fetch_document(
                listing_url, max_age=self.config["listing_max_age"]
            )
            if document is None:
                return [NewsItem.failure_sentinel(self.capture_date())]

            candidates, matched = self.find_candidates(document)
            if matched:
                logger.info(
                    f"Found {len(candidates)} article links on "
                    f"{extract_domain(listing_url)}"
                )
                return [self.enrich(candidate) for candidate in candidates]

            candidates = self.fallback_candidates(document)
            logger.info(
                f"No link pattern matched on {listing_url}, "
                f"kept {len(candidates)} links from the fallback scan"
            )
            return [
                NewsItem.from_candidate(
                    candidate, FETCHING_PLACEHOLDER, self.capture_date()
                )
                for candidate in candidates
            ]
        except Exception as e:
            logger.error(f"Error fetching news from {listing_url}: {e}")
            return [NewsItem.failure_sentinel(self.capture_date())]

    def enrich(self, candidate: CandidateLink) -> NewsItem:
        content = self.extractor.extract(candidate.url)
        return NewsItem.from_candidate(candidate, content, self.capture_date())

    def find_candidates(self, document: Selector) -> Tuple[List[CandidateLink], bool]:
        """
        Run the link cascade.

        Returns the candidates taken from the first ``max_links`` anchors
        of the winning pattern, and whether any pattern matched at all.
        Anchors without an href or without text are dropped, so fewer
        than ``max_links`` candidates can come back.
        """
        match = first_match(document, LINK_SELECTORS)
        if match is None:
            return [], False

        logger.debug(f"Link cascade matched '{match.selector}' ({len(match.nodes)} anchors)")
        candidates = []
        for anchor in match.nodes[:self.max_links]:
            candidate = self.candidate_from_anchor(anchor)
            if candidate is not None:
                candidates.append(candidate)
        return candidates, True

    def fallback_candidates(self, document: Selector) -> List[CandidateLink]:
        """
        Scan every anchor in document order and keep the first
        ``max_links`` ones whose text is long enough to be a headline.
        """
        min_length = int(self.config["min_fallback_title_length"])
        candidates = []
        for anchor in select(document, "a"):
            if len(candidates) >= self.max_links:
                break
            candidate = self.candidate_from_anchor(anchor)
            if candidate is not None and len(candidate.title) > min_length:
                candidates.append(candidate)
        return candidates

    def candidate_from_anchor(self, anchor: Selector) -> Optional[CandidateLink]:
        href = node_attr(anchor, "href")
        title = node_text(anchor).strip()
        if not href or not title:
            return None
        return CandidateLink(
            title=title,
            href=href,
            url=resolve_url(href, self.config["base_url"]),
        )
