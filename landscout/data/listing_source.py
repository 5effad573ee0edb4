"""Land listing source: Zillow API -> browser scraping -> degraded result."""

import logging

from landscout.config import Settings
from landscout.data.mock import generate_mock_listings
from landscout.data.scraper import ListingScraper
from landscout.data.zillow import ZillowClient
from landscout.errors import ListingSourceError, ScrapeError
from landscout.models.listing import Listing

logger = logging.getLogger(__name__)


class ListingSource:
    def __init__(
        self,
        config: Settings,
        api: ZillowClient | None = None,
        scraper: ListingScraper | None = None,
    ):
        self.config = config
        self.api = api or ZillowClient(config)
        self.scraper = scraper or ListingScraper(config)

    async def fetch_listings(self, location: str) -> list[Listing]:
        """Fetch land listings, falling back one stage at a time.

        Each stage runs at most once. An exhausted chain returns mock
        listings when `use_mock_data` is set, otherwise an empty list.
        """
        logger.info("Fetching land listings for %s...", location)

        try:
            return await self.api.search_land(location)
        except ListingSourceError as e:
            logger.warning("Error fetching land listings: %s", e)

        logger.info("Falling back to web scraping...")
        try:
            listings = await self.scraper.scrape(location)
        except ScrapeError as e:
            logger.warning("Web scraping also failed: %s", e)
            listings = []

        if listings:
            return listings
        return self._degraded(location)

    def _degraded(self, location: str) -> list[Listing]:
        if self.config.use_mock_data:
            logger.warning("No listings from any source, using mock data for %s", location)
            return generate_mock_listings(location)
        logger.warning("No listings found for %s", location)
        return []
