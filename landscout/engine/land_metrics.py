"""Lot size, price per square foot and buildable area calculations."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from landscout.models.enrichment import ZoningInfo

SQFT_PER_ACRE = Decimal("43560")

_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


def _to_decimal(value) -> Decimal:
    """Coerce a price/size value to Decimal; blanks and garbage become 0."""
    if value is None or value == "":
        return Decimal("0")
    try:
        result = Decimal(str(value).replace(",", "").strip())
    except InvalidOperation:
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def extract_lot_size(size_text: str | None) -> Decimal:
    """Parse a lot size like "1.5 acres" or "10,000 sqft" into square feet.

    Values without "acre" in the text are assumed to already be square feet.
    """
    if not size_text:
        return Decimal("0")

    match = _LEADING_NUMBER_RE.search(size_text.replace(",", ""))
    if match is None:
        return Decimal("0")

    value = Decimal(match.group(0))
    if "acre" in size_text.lower():
        return value * SQFT_PER_ACRE
    return value


def calculate_price_per_sqft(price, sqft) -> str:
    """Price divided by lot area, as a string with exactly two decimals.

    Returns "0" when either side is missing or zero.
    """
    price_d = _to_decimal(price)
    sqft_d = _to_decimal(sqft)
    if not price_d or not sqft_d:
        return "0"
    return str((price_d / sqft_d).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def buildable_percentage(zoning: ZoningInfo) -> Decimal:
    """Percentage (0-100) of the lot that can be built on.

    Prefers the model's own buildable estimate; otherwise uses lot coverage
    as a stand-in, which ignores setbacks.
    """
    if zoning.buildable_percentage_estimate is not None:
        return zoning.buildable_percentage_estimate * 100
    if zoning.lot_coverage is not None:
        return zoning.lot_coverage * 100
    raise ValueError("Zoning info has neither buildablePercentageEstimate nor lotCoverage")
