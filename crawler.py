import requests
import logging
from pydantic import BaseModel, Field

from handlers import BaseHandler
from handlers.manager import HandlerManager
from handlers.result import CrawlResponse, CrawlResult
from w3c_validators import ValidatorError

logger = logging.getLogger(__name__)

class CheckReport(BaseModel):
    url: str = Field(default="")
    success: bool = Field(default=True)
    message: str = Field(default="")
    failures: list[CrawlResult] = Field(default_factory=list)

class Crawler:
    def __init__(self, manager: HandlerManager = None, handlers: list[BaseHandler] = None,
                 timeout: float = 30):
        """Initialize the crawler with the handlers to run on each page"""
        self.manager = manager
        if handlers is None:
            handlers = (manager or HandlerManager()).get_handlers()
        self.handlers = handlers
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
        })

    def fetch(self, url: str) -> CrawlResult:
        """Download a page and wrap it for the handlers"""
        logger.info(f"Downloading {url}")
        response = self.session.get(url, timeout=self.timeout)
        return CrawlResult(
            url=url,
            response=CrawlResponse(
                code=response.status_code,
                body=response.text,
                content_type=response.headers.get('Content-Type', ''),
                headers=dict(response.headers),
            ),
        )

    def run_handlers(self, result: CrawlResult) -> list[CrawlResult]:
        """Run every handler on ``result`` and collect the failures"""
        failures = []
        for handler in self.handlers:
            try:
                failure = handler.handle(result)
            except ValidatorError as e:
                logger.error(f"Handler {handler.name} failed on {result.url}: {e}", exc_info=True)
                failure = result.dup()
                failure.success = False
                failure.description = f"Handler error ({handler.name})"
                failure.data = str(e)
            if failure is not None:
                failures.append(failure)
        return failures

    def check(self, url: str) -> CheckReport:
        """Crawl a URL and run the handlers on it

        Returns:
            CheckReport: success is False when the page could not be fetched
            or any handler reported a failure
        """
        try:
            result = self.fetch(url)
        except requests.RequestException as e:
            logger.error(f"Error during crawl: {e}", exc_info=True)
            return CheckReport(url=url, success=False, message=str(e))

        failures = self.run_handlers(result)
        return CheckReport(
            url=url,
            success=not failures,
            message=f"{len(failures)} handler(s) reported failures" if failures else "",
            failures=failures,
        )
