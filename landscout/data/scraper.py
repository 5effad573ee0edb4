"""Headless-browser scraper for Zillow's public land search page.

Used only when the search API is unavailable. Zillow renames its CSS classes
often, so every field is read through an ordered list of extraction
strategies and the first one that finds an element wins.
"""

import logging
import re
from dataclasses import dataclass
from urllib.parse import urljoin

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from landscout.config import Settings
from landscout.errors import ScrapeError
from landscout.models.listing import Listing

logger = logging.getLogger(__name__)

ZILLOW_SITE_URL = "https://www.zillow.com"

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

CARD_SELECTORS = [".property-card", ".list-card", '[data-test="property-card"]']


@dataclass(frozen=True)
class ExtractionStrategy:
    """Read one field from a card: the `index`-th match of `selector`."""

    selector: str
    read: str = "text"  # "text" | "href"
    index: int = 0


ADDRESS_STRATEGIES = [
    ExtractionStrategy(".property-card-addr"),
    ExtractionStrategy(".list-card-addr"),
    ExtractionStrategy('[data-test="property-card-addr"]'),
]
PRICE_STRATEGIES = [
    ExtractionStrategy(".property-card-price"),
    ExtractionStrategy(".list-card-price"),
    ExtractionStrategy('[data-test="property-card-price"]'),
]
DESCRIPTION_STRATEGIES = [
    ExtractionStrategy(".property-card-description"),
    ExtractionStrategy(".list-card-description"),
]
LINK_STRATEGIES = [
    ExtractionStrategy("a.property-card-link", read="href"),
    ExtractionStrategy("a.list-card-link", read="href"),
    ExtractionStrategy('a[href*="/homedetails/"]', read="href"),
]
# The second details bullet is the lot size ("3 bds | 2 ba | 0.5 acres lot")
LOT_SIZE_STRATEGIES = [
    ExtractionStrategy(".property-card-details li", index=1),
    ExtractionStrategy(".list-card-details li", index=1),
]


def listing_page_url(location: str) -> str:
    """Search page URL, e.g. "Seattle, WA" -> https://www.zillow.com/seattle-wa/land/."""
    slug = re.sub(r",?\s+", "-", location).lower()
    return f"{ZILLOW_SITE_URL}/{slug}/land/"


def clean_price(text: str) -> str:
    return re.sub(r"[^\d.]", "", text)


async def first_match(element, strategies: list[ExtractionStrategy]) -> str | None:
    """Return the value read by the first strategy that finds an element."""
    for strategy in strategies:
        matches = await element.query_selector_all(strategy.selector)
        if len(matches) <= strategy.index:
            continue
        target = matches[strategy.index]
        if strategy.read == "href":
            return await target.get_attribute("href")
        return await target.text_content()
    return None


async def find_cards(page) -> list:
    for selector in CARD_SELECTORS:
        cards = await page.query_selector_all(selector)
        if cards:
            logger.debug("Matched %d cards with %s", len(cards), selector)
            return cards
    return []


async def card_to_listing(card, page_url: str) -> Listing:
    address = await first_match(card, ADDRESS_STRATEGIES) or ""
    price = await first_match(card, PRICE_STRATEGIES) or ""
    description = await first_match(card, DESCRIPTION_STRATEGIES) or ""
    land_size = await first_match(card, LOT_SIZE_STRATEGIES) or ""
    href = await first_match(card, LINK_STRATEGIES)
    zpid = await card.get_attribute("data-zpid") or ""

    return Listing(
        address=address.strip(),
        price=clean_price(price),
        source_id=zpid,
        land_size_text=land_size.strip(),
        description=description.strip(),
        detail_url=urljoin(page_url, href) if href else None,
    )


class ListingScraper:
    def __init__(self, config: Settings):
        self.config = config

    async def scrape(self, location: str) -> list[Listing]:
        """Scrape land listings for a location.

        Raises ScrapeError if the browser cannot be launched or the page
        cannot be loaded. The browser is always closed before returning.
        """
        url = listing_page_url(location)
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True, args=BROWSER_ARGS)
                try:
                    page = await browser.new_page()
                    return await self.scrape_page(page, url)
                finally:
                    try:
                        await browser.close()
                    except PlaywrightError as e:
                        logger.warning("Error closing browser: %s", e)
        except PlaywrightError as e:
            raise ScrapeError(f"Scraping {url} failed: {e}") from e

    async def scrape_page(self, page, url: str) -> list[Listing]:
        logger.info("Navigating to %s", url)
        await page.goto(
            url, wait_until="networkidle", timeout=self.config.scrape_navigation_timeout_ms
        )

        try:
            await page.wait_for_selector(
                ", ".join(CARD_SELECTORS), timeout=self.config.scrape_selector_timeout_ms
            )
        except PlaywrightTimeoutError:
            logger.warning("Selector timeout - page structure may have changed")

        cards = await find_cards(page)
        if not cards:
            logger.warning("No property cards found on %s", url)
            return []

        return [await card_to_listing(card, url) for card in cards]
