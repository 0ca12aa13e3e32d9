"""
Submodule for the two-stage news pipeline.
Link discovery on the listing page, then content extraction per article.
"""

from .models import CandidateLink, NewsItem
from .fetcher import FetchResult, HTMLFetcher
from .extractor import ContentExtractor
from .discoverer import LinkDiscoverer
from .parser import parse_html, resolve_url, normalize_content

__all__ = [
    "CandidateLink",
    "NewsItem",
    "FetchResult",
    "HTMLFetcher",
    "ContentExtractor",
    "LinkDiscoverer",
    "parse_html",
    "resolve_url",
    "normalize_content",
]
