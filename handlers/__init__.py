from abc import ABC, abstractmethod
from typing import Optional
from .result import CrawlResponse, CrawlResult

__all__ = ['BaseHandler', 'CrawlResponse', 'CrawlResult']

class BaseHandler(ABC):
    """Base class for handler plugins

    A handler looks at one crawled page. It returns None when the page passes,
    or a copy of the result (see CrawlResult.dup) carrying a description and
    data when it fails. The input result is never modified.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler type as used in config.yaml"""

    @abstractmethod
    def handle(self, result: CrawlResult) -> Optional[CrawlResult]:
        """Check a crawled page"""
