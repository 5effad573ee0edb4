from pydantic import BaseModel, ConfigDict


class Listing(BaseModel):
    """A land parcel offered for sale, as returned by the API or the scraper."""

    model_config = ConfigDict(frozen=True)

    address: str
    price: str  # digits only, e.g. "200000"
    source_id: str = ""  # zpid
    land_size_text: str = ""  # e.g. "1.5 acres", "10,000 sqft"
    description: str = ""
    detail_url: str | None = None
    full_description: str | None = None

    @property
    def prompt_description(self) -> str:
        return self.full_description or self.description or ""
