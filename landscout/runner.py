"""One collection run: fetch listings, enrich them, write the CSV."""

import logging
from pathlib import Path

from landscout.config import Settings
from landscout.data.listing_source import ListingSource
from landscout.engine.enrichment import EnrichmentPipeline
from landscout.export.csv_writer import write_records

logger = logging.getLogger(__name__)


async def run(
    config: Settings,
    location: str | None = None,
    source: ListingSource | None = None,
    pipeline: EnrichmentPipeline | None = None,
) -> Path:
    location = location or config.default_location
    source = source or ListingSource(config)
    pipeline = pipeline or EnrichmentPipeline(config)

    logger.info("Starting Zillow land data collection for %s...", location)
    if config.use_mock_data:
        logger.info("Mock data enabled if no live listings are found")
    if not config.rapid_api_key:
        logger.warning("RapidAPI key not configured, listing search will likely fail")

    listings = await source.fetch_listings(location)
    if config.max_listings is not None:
        listings = listings[: config.max_listings]
    logger.info("Found %d land listings", len(listings))

    records = await pipeline.process_listings(listings)

    output = write_records(records, config.output_file)
    logger.info("Data written to %s", output)
    return output
