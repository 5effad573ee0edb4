"""Pydantic models for AI inference replies and enriched output rows."""

import re
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def _feet(v):
    """Accept 20, "20", or "20 feet"; anything without a number becomes None."""
    if isinstance(v, str):
        match = _NUMBER_RE.search(v.replace(",", ""))
        return match.group(0) if match else None
    return v


class Setbacks(BaseModel):
    front: Decimal | None = None
    sides: Decimal | None = None
    rear: Decimal | None = None

    @field_validator("front", "sides", "rear", mode="before")
    @classmethod
    def parse_feet(cls, v):
        return _feet(v)


class ZoningInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    zone_type: str = Field("", alias="zoneType")
    lot_coverage: Decimal | None = Field(None, alias="lotCoverage", ge=0, le=1)
    height_limit: Decimal | None = Field(None, alias="heightLimit")
    setbacks: Setbacks = Field(default_factory=Setbacks)
    additional_restrictions: str = Field("", alias="additionalRestrictions")
    buildable_percentage_estimate: Decimal | None = Field(
        None, alias="buildablePercentageEstimate", ge=0, le=1
    )

    @field_validator("height_limit", mode="before")
    @classmethod
    def parse_height(cls, v):
        return _feet(v)

    @field_validator("setbacks", mode="before")
    @classmethod
    def default_setbacks(cls, v):
        # Free-text setbacks ("20ft front, 5ft sides") are dropped
        return v if isinstance(v, (dict, Setbacks)) else {}

    @field_validator("additional_restrictions", mode="before")
    @classmethod
    def join_restrictions(cls, v):
        # Models sometimes answer with a list of restrictions
        if isinstance(v, list):
            return "; ".join(str(item) for item in v)
        return "" if v is None else str(v)

    @field_validator("zone_type", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else str(v)


class MarketEstimate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    avg_land_price_per_sqft: Decimal = Field(alias="avgLandPricePerSqFt")
    avg_apt_price_per_sqft: Decimal = Field(alias="avgAptPricePerSqFt")


class EnrichedRecord(BaseModel):
    address: str
    price_per_sqft: str  # "3.06", or "0" when price/lot size is unknown
    avg_land_price_per_sqft: Decimal
    avg_apt_price_per_sqft: Decimal
    buildable_percentage: Decimal = Field(ge=0, le=100)
