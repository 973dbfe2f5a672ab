# ABOUTME: Crawl4AI-based page markup provider for the guide site
# ABOUTME: Renders each page in a headless browser, scrolls it fully so lazy images load, and parses the HTML

from bs4 import BeautifulSoup
from crawl4ai import AsyncWebCrawler, BrowserConfig, CacheMode, CrawlerRunConfig
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt

from rocket_lineups.config import get_config
from rocket_lineups.extraction.base import PageAcquisitionError
from rocket_lineups.utils.logging import get_logger, log_api_call, suppress_library_output


class Crawl4AIPageProvider:
    """Page markup provider using crawl4ai's headless browser."""

    def __init__(
        self,
        headless: bool | None = None,
        page_timeout_ms: int | None = None,
        scroll_delay: float | None = None,
        fetch_attempts: int | None = None,
    ):
        """Initialize the provider.

        Args:
            headless: Whether to run browser in headless mode (defaults to config.headless)
            page_timeout_ms: Page load timeout (defaults to config.page_timeout_ms)
            scroll_delay: Pause between scroll steps (defaults to config.scroll_delay)
            fetch_attempts: Attempts per page before giving up (defaults to config.fetch_attempts)
        """
        config = get_config()
        self.headless = config.headless if headless is None else headless
        self.page_timeout_ms = page_timeout_ms or config.page_timeout_ms
        self.scroll_delay = config.scroll_delay if scroll_delay is None else scroll_delay
        self.fetch_attempts = fetch_attempts or config.fetch_attempts
        self.logger = get_logger(__name__)

        self.logger.info(
            "Initialized Crawl4AI page provider", headless=self.headless, fetch_attempts=self.fetch_attempts
        )

    async def fetch_rendered_page(self, url: str) -> BeautifulSoup:
        """Fetch the fully rendered page at ``url`` and parse it."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.fetch_attempts),
            retry=retry_if_exception_type(PageAcquisitionError),
            reraise=True,
        ):
            with attempt:
                html = await self._render(url)

        return BeautifulSoup(html, "html.parser")

    @log_api_call("crawl4ai")
    async def _render(self, url: str) -> str:
        crawl_config = CrawlerRunConfig(
            cache_mode=CacheMode.BYPASS,
            wait_until="networkidle",
            page_timeout=self.page_timeout_ms,
            scan_full_page=True,  # Scroll to the bottom so lazy images resolve
            scroll_delay=self.scroll_delay,
            wait_for_images=True,
            delay_before_return_html=1.0,
        )
        browser_cfg = BrowserConfig(headless=self.headless, extra_args=["--no-sandbox"])

        try:
            with suppress_library_output():
                async with AsyncWebCrawler(config=browser_cfg) as crawler:
                    result = await crawler.arun(url=url, config=crawl_config)

        except Exception as e:
            self.logger.error("Unexpected error while rendering page", error=str(e), error_type=type(e).__name__, url=url)
            raise PageAcquisitionError(f"Failed to render page {url}: {e}") from e

        if not result or not result.success:
            error_msg = getattr(result, "error_message", "Unknown error") if result else "No result"
            self.logger.error("Crawling failed", url=url, error_message=error_msg)
            raise PageAcquisitionError(f"Failed to crawl page {url}: {error_msg}")

        if not result.html:
            raise PageAcquisitionError(f"No markup returned for {url}")

        self.logger.debug("Rendered page", url=url, html_length=len(result.html))
        return result.html
