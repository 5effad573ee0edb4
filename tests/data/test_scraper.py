"""Tests for the Zillow page scraper using in-memory page/element fakes."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from landscout.data.scraper import (
    ExtractionStrategy,
    ListingScraper,
    clean_price,
    first_match,
    listing_page_url,
)
from landscout.errors import ScrapeError

PAGE_URL = "https://www.zillow.com/seattle-wa/land/"


class FakeElement:
    def __init__(self, text: str = "", attrs: dict | None = None, children: dict | None = None):
        self.text = text
        self.attrs = attrs or {}
        self.children = children or {}

    async def query_selector_all(self, selector: str) -> list:
        return self.children.get(selector, [])

    async def text_content(self) -> str:
        return self.text

    async def get_attribute(self, name: str) -> str | None:
        return self.attrs.get(name)


class FakePage(FakeElement):
    def __init__(self, cards: dict | None = None, wait_error: Exception | None = None):
        super().__init__(children=cards)
        self.goto = AsyncMock()
        self.wait_for_selector = AsyncMock(side_effect=wait_error)


def _list_card() -> FakeElement:
    """Card using the older list-card markup."""
    return FakeElement(
        attrs={"data-zpid": "2077"},
        children={
            ".list-card-addr": [FakeElement(" 55 Cedar Way, Seattle, WA ")],
            ".list-card-price": [FakeElement("$185,000")],
            ".list-card-description": [FakeElement("Corner lot")],
            ".list-card-details li": [FakeElement("Lot / Land"), FakeElement("0.25 acres lot")],
            'a[href*="/homedetails/"]': [FakeElement(attrs={"href": "/homedetails/55-Cedar/2077_zpid/"})],
        },
    )


class TestHelpers:
    def test_listing_page_url(self):
        assert listing_page_url("Seattle, WA") == PAGE_URL
        assert listing_page_url("San Luis Obispo, CA") == "https://www.zillow.com/san-luis-obispo-ca/land/"

    def test_clean_price(self):
        assert clean_price("$185,000") == "185000"
        assert clean_price("$1,250,000+") == "1250000"

    async def test_first_match_order(self):
        card = FakeElement(children={
            ".b": [FakeElement("second")],
            ".c": [FakeElement("third")],
        })
        strategies = [ExtractionStrategy(".a"), ExtractionStrategy(".b"), ExtractionStrategy(".c")]
        assert await first_match(card, strategies) == "second"

    async def test_first_match_index_requires_enough_matches(self):
        card = FakeElement(children={
            ".details li": [FakeElement("only one")],
            ".other li": [FakeElement("a"), FakeElement("b")],
        })
        strategies = [ExtractionStrategy(".details li", index=1), ExtractionStrategy(".other li", index=1)]
        assert await first_match(card, strategies) == "b"

    async def test_first_match_none(self):
        assert await first_match(FakeElement(), [ExtractionStrategy(".a")]) is None


class TestScrapePage:
    async def test_extracts_card_fields(self, test_settings):
        page = FakePage(cards={".list-card": [_list_card()]})
        listings = await ListingScraper(test_settings).scrape_page(page, PAGE_URL)

        assert len(listings) == 1
        listing = listings[0]
        assert listing.address == "55 Cedar Way, Seattle, WA"
        assert listing.price == "185000"
        assert listing.source_id == "2077"
        assert listing.land_size_text == "0.25 acres lot"
        assert listing.description == "Corner lot"
        assert listing.detail_url == "https://www.zillow.com/homedetails/55-Cedar/2077_zpid/"
        page.goto.assert_awaited_once_with(PAGE_URL, wait_until="networkidle", timeout=60_000)

    async def test_first_card_selector_wins(self, test_settings):
        property_card = FakeElement(children={".property-card-addr": [FakeElement("1 Main St")]})
        page = FakePage(cards={".property-card": [property_card], ".list-card": [_list_card()]})
        listings = await ListingScraper(test_settings).scrape_page(page, PAGE_URL)
        assert [l.address for l in listings] == ["1 Main St"]

    async def test_selector_timeout_degrades_to_empty(self, test_settings):
        page = FakePage(cards={}, wait_error=PlaywrightTimeoutError("Timeout 10000ms exceeded"))
        assert await ListingScraper(test_settings).scrape_page(page, PAGE_URL) == []


class TestScrapeLifecycle:
    def _playwright(self, page):
        browser = MagicMock()
        browser.new_page = AsyncMock(return_value=page)
        browser.close = AsyncMock()
        pw = MagicMock()
        pw.chromium.launch = AsyncMock(return_value=browser)
        cm = MagicMock()
        cm.__aenter__ = AsyncMock(return_value=pw)
        cm.__aexit__ = AsyncMock(return_value=False)
        return cm, pw, browser

    async def test_browser_closed_on_success(self, test_settings):
        page = FakePage(cards={".list-card": [_list_card()]})
        cm, pw, browser = self._playwright(page)
        with patch("landscout.data.scraper.async_playwright", return_value=cm):
            listings = await ListingScraper(test_settings).scrape("Seattle, WA")

        assert len(listings) == 1
        assert pw.chromium.launch.call_args.kwargs["headless"] is True
        browser.close.assert_awaited_once()

    async def test_browser_closed_on_navigation_failure(self, test_settings):
        page = FakePage()
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
        cm, _, browser = self._playwright(page)
        with patch("landscout.data.scraper.async_playwright", return_value=cm):
            with pytest.raises(ScrapeError):
                await ListingScraper(test_settings).scrape("Seattle, WA")

        browser.close.assert_awaited_once()

    async def test_close_failure_keeps_scraped_listings(self, test_settings):
        page = FakePage(cards={".list-card": [_list_card()]})
        cm, _, browser = self._playwright(page)
        browser.close.side_effect = PlaywrightError("Target page, context or browser has been closed")
        with patch("landscout.data.scraper.async_playwright", return_value=cm):
            listings = await ListingScraper(test_settings).scrape("Seattle, WA")

        assert [l.address for l in listings] == ["55 Cedar Way, Seattle, WA"]
        browser.close.assert_awaited_once()
