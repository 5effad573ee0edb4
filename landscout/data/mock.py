"""Synthetic land listings for offline runs."""

import random

from landscout.models.listing import Listing

NEIGHBORHOODS = ["Ballard", "Fremont", "Wallingford", "Queen Anne", "Capitol Hill"]
STREET_NAMES = ["Pine", "Oak", "Maple", "Cedar", "Elm"]
STREET_TYPES = ["Ave", "St", "Blvd", "Dr", "Way", "Pl"]
DIRECTIONS = ["N", "S", "E", "W", "NE", "NW", "SE", "SW"]


def generate_mock_listings(location: str, count: int = 10, seed: int | None = None) -> list[Listing]:
    """Generate plausible land listings ($100k-$600k, 0.25-2.25 acres)."""
    rng = random.Random(seed)
    listings = []
    for i in range(count):
        street_num = rng.randint(1000, 9999)
        neighborhood = rng.choice(NEIGHBORHOODS)
        address = (
            f"{street_num} {rng.choice(STREET_NAMES)} {rng.choice(STREET_TYPES)} "
            f"{rng.choice(DIRECTIONS)}, {neighborhood}, {location}"
        )
        price = rng.randint(100, 599) * 1000
        acres = f"{rng.uniform(0.25, 2.25):.2f}"

        listings.append(Listing(
            address=address,
            price=str(price),
            source_id=f"mock-{i + 1}",
            land_size_text=f"{acres} acres",
            description=f"Beautiful {acres} acre lot in {neighborhood}. Zoned for residential development.",
            full_description=(
                f"Beautiful {acres} acre lot in {neighborhood}. This property is located in a "
                "desirable area with good schools and easy access to amenities. The land is zoned "
                "R-1 for single-family residential development. Property has utilities available "
                "at the street."
            ),
        ))
    return listings
