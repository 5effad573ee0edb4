"""Zillow land search via the RapidAPI propertyExtendedSearch endpoint."""

import logging
from urllib.parse import urljoin

import httpx

from landscout.config import Settings
from landscout.errors import ListingSourceError
from landscout.models.listing import Listing

logger = logging.getLogger(__name__)

ZILLOW_SEARCH_PATH = "/propertyExtendedSearch"
ZILLOW_SITE_URL = "https://www.zillow.com"


def _land_size_text(prop: dict) -> str:
    if prop.get("landSize"):
        return str(prop["landSize"])
    value = prop.get("lotAreaValue")
    if value in (None, ""):
        return ""
    unit = str(prop.get("lotAreaUnit") or "sqft")
    return f"{value} {unit}"


def listing_from_prop(prop: dict) -> Listing:
    """Map one search result onto a Listing."""
    price = prop.get("price")
    detail_url = prop.get("detailUrl") or None
    if detail_url:
        detail_url = urljoin(ZILLOW_SITE_URL, detail_url)

    return Listing(
        address=str(prop.get("address") or ""),
        price="" if price is None else str(price),
        source_id=str(prop.get("zpid") or ""),
        land_size_text=_land_size_text(prop),
        description=str(prop.get("description") or ""),
        detail_url=detail_url,
        full_description=prop.get("fullDescription") or None,
    )


class ZillowClient:
    def __init__(self, config: Settings):
        self.config = config
        self.base_url = f"https://{config.rapid_api_host}"
        self.headers = {
            "X-RapidAPI-Key": config.rapid_api_key,
            "X-RapidAPI-Host": config.rapid_api_host,
        }

    async def search_land(self, location: str) -> list[Listing]:
        """Fetch land-type listings for a location.

        Raises ListingSourceError on any transport, status or decoding failure.
        """
        params = {"location": location, "home_type": "LAND"}
        try:
            async with httpx.AsyncClient(timeout=self.config.http_timeout_seconds) as client:
                resp = await client.get(
                    f"{self.base_url}{ZILLOW_SEARCH_PATH}",
                    params=params,
                    headers=self.headers,
                )
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ListingSourceError(f"Zillow search failed for {location}: {e}") from e

        if not isinstance(data, dict):
            raise ListingSourceError(f"Zillow search returned a non-object body for {location}")

        props = data.get("props")
        if props is None:
            return []
        if not isinstance(props, list):
            raise ListingSourceError(f"Zillow search returned malformed props for {location}: {props!r}")

        listings = [listing_from_prop(p) for p in props if isinstance(p, dict)]
        logger.debug("Zillow returned %d props, mapped %d listings", len(props), len(listings))
        return listings
