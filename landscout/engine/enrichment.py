"""Per-listing enrichment: lot size -> zoning -> market prices -> metrics.

Listings are processed one at a time so that at most one AI request is in
flight. A listing that fails at any step is logged and left out of the output.
"""

import logging

from landscout.config import Settings
from landscout.data.inference import InferenceClient
from landscout.engine.land_metrics import (
    buildable_percentage,
    calculate_price_per_sqft,
    extract_lot_size,
)
from landscout.errors import LandScoutError
from landscout.models.enrichment import EnrichedRecord
from landscout.models.listing import Listing

logger = logging.getLogger(__name__)


class EnrichmentPipeline:
    def __init__(self, config: Settings, inference: InferenceClient | None = None):
        self.config = config
        self.inference = inference or InferenceClient(config)

    async def enrich(self, listing: Listing) -> EnrichedRecord:
        lot_size = extract_lot_size(listing.land_size_text)

        logger.info("Fetching zoning info for %s...", listing.address)
        zoning = await self.inference.extract_zoning_info(
            listing.address, listing.prompt_description
        )

        logger.info("Fetching market data for area around %s...", listing.address)
        market = await self.inference.estimate_market_prices(listing.address)

        return EnrichedRecord(
            address=listing.address,
            price_per_sqft=calculate_price_per_sqft(listing.price, lot_size),
            avg_land_price_per_sqft=market.avg_land_price_per_sqft,
            avg_apt_price_per_sqft=market.avg_apt_price_per_sqft,
            buildable_percentage=buildable_percentage(zoning),
        )

    async def process_listings(self, listings: list[Listing]) -> list[EnrichedRecord]:
        logger.info("Processing %d listings...", len(listings))
        records: list[EnrichedRecord] = []

        for listing in listings:
            try:
                record = await self.enrich(listing)
            except (LandScoutError, ValueError) as e:
                logger.error("Error processing listing %s: %s", listing.address, e)
                continue
            records.append(record)
            logger.info("Processed: %s", listing.address)

        return records
