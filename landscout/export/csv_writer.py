"""CSV export of enriched listings."""

import csv
import logging
from decimal import Decimal
from pathlib import Path

from landscout.models.enrichment import EnrichedRecord

logger = logging.getLogger(__name__)

COLUMNS = [
    ("address", "Address/Land Identifier"),
    ("price_per_sqft", "Price per Square Feet"),
    ("avg_land_price_per_sqft", "Average Land Price in Area per SqFt"),
    ("avg_apt_price_per_sqft", "Average Apartment Price in Area per SqFt"),
    ("buildable_percentage", "Percentage of Buildable Area"),
]


def format_value(value) -> str:
    """Render Decimals without exponent or trailing zeros (60.0 -> "60")."""
    if isinstance(value, Decimal):
        text = format(value.normalize(), "f")
        return "0" if text in ("-0", "") else text
    return str(value)


def write_records(records: list[EnrichedRecord], path: str | Path) -> Path:
    """Write records to `path`, replacing any existing file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([title for _, title in COLUMNS])
        for record in records:
            writer.writerow([format_value(getattr(record, field)) for field, _ in COLUMNS])

    logger.debug("Wrote %d rows to %s", len(records), path)
    return path
