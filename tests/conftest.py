"""Shared fixtures: settings isolated from the environment and sample listings."""

import pytest

from landscout.config import Settings
from landscout.models.listing import Listing


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        default_location="Seattle, WA",
        output_file=str(tmp_path / "output.csv"),
        rapid_api_key="rapid-test-key",
        rapid_api_host="zillow-com1.p.rapidapi.com",
        openai_api_key="openai-test-key",
        use_mock_data=False,
    )


@pytest.fixture
def pine_listing() -> Listing:
    """1.5 acre lot at $200K -> 65,340 sqft, $3.06/sqft."""
    return Listing(
        address="123 Pine St",
        price="200000",
        source_id="1001",
        land_size_text="1.5 acres",
        description="Level lot with utilities at the street.",
    )


@pytest.fixture
def three_listings() -> list[Listing]:
    return [
        Listing(address="1 First Ave", price="100000", land_size_text="10,000 sqft"),
        Listing(address="2 Second Ave", price="150000", land_size_text="0.5 acres"),
        Listing(address="3 Third Ave", price="300000", land_size_text="1 acre"),
    ]
