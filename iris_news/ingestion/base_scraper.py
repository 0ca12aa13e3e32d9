import logging
from typing import Any, Dict, Optional

from scrapy import Selector

from iris_news.utils.config import DEFAULT_CONFIG
from iris_news.utils.date import capture_date
from .fetcher import HTMLFetcher
from .parser import parse_html


logger = logging.getLogger(__name__)


class BaseNewsScraper:
    """
    Base class for both pipeline stages.
    Holds the fetcher and the request settings, and turns a URL into a
    parsed document without ever raising.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        fetcher: Optional[HTMLFetcher] = None,
    ):
        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)
        self.fetcher = fetcher or HTMLFetcher(timeout=self.config["fetch_timeout"])

    @property
    def request_headers(self) -> Dict[str, str]:
        return {"User-Agent": self.config["user_agent"]}

    def capture_date(self) -> str:
        return capture_date(timezone=self.config.get("timezone"))

    def fetch_document(self, url: str, max_age: Optional[int] = None) -> Optional[Selector]:
        """
        Fetch ``url`` and parse it.
        Returns None on a transport error or a non-2xx status.
        """
        result = self.fetcher.fetch(url, headers=self.request_headers, max_age=max_age)
        if not result.ok:
            error = {
                "status": result.status,
                "url": url,
                "message": result.error,
            }
            logger.warning(f"Failed to load page: {error}")
            return None
        return parse_html(result.body)
