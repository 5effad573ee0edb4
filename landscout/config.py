from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "frozen": True}

    # Run
    default_location: str = "Seattle, WA"
    output_file: str = "output.csv"
    use_mock_data: bool = False
    max_listings: int | None = Field(None, ge=0)  # None processes the full fetched set

    # Listing search (RapidAPI Zillow)
    rapid_api_key: str = ""
    rapid_api_host: str = "zillow-com1.p.rapidapi.com"

    # AI inference
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4"

    # Timeouts
    http_timeout_seconds: float = 30.0
    scrape_navigation_timeout_ms: int = 60_000
    scrape_selector_timeout_ms: int = 10_000

    log_level: str = "INFO"


settings = Settings()
