"""OpenAI-style chat completions client for zoning and market estimates."""

import json
import logging
import re
from decimal import Decimal

import httpx
from pydantic import BaseModel, ValidationError

from landscout.config import Settings
from landscout.errors import InferenceCallError, InferenceParseError
from landscout.models.enrichment import MarketEstimate, ZoningInfo

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_BARE_FENCE_RE = re.compile(r"```\s*(.*?)\s*```", re.DOTALL)

ZONING_SYSTEM_PROMPT = (
    "You are a real estate and urban planning expert. "
    "Extract or estimate zoning information from property descriptions."
)

MARKET_SYSTEM_PROMPT = "You are a real estate market expert with access to current pricing data."


def extract_json(text: str) -> dict | None:
    """Pull a JSON object out of a model reply.

    Looks for a ```json fence, then a bare ``` fence, then falls back to the
    whole text. Returns None when no JSON object can be decoded.
    """
    match = _JSON_FENCE_RE.search(text) or _BARE_FENCE_RE.search(text)
    candidate = match.group(1) if match else text
    try:
        data = json.loads(candidate.strip(), parse_float=Decimal)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def _zoning_prompt(address: str, description: str) -> str:
    return (
        f"Extract zoning information from this property located at {address}.\n"
        f"Description: {description}\n\n"
        "Please return a JSON object with the following fields:\n"
        "- zoneType: The zoning classification (e.g., R-1, Commercial, etc.)\n"
        "- lotCoverage: The maximum percentage of the lot that can be covered by structures "
        "(as a decimal, e.g., 0.35 for 35%)\n"
        "- heightLimit: Maximum building height in feet\n"
        "- setbacks: An object with front, sides, and rear setback requirements in feet\n"
        "- additionalRestrictions: Any other notable restrictions\n"
        "- buildablePercentageEstimate: Your estimate of the total percentage of the lot that "
        "is buildable (as a decimal, e.g., 0.6 for 60%)\n\n"
        "If the description doesn't explicitly mention a value, use your expert knowledge to "
        "make a reasonable estimate based on the location and description."
    )


def _market_prompt(address: str) -> str:
    return (
        f"Provide current market price estimates for {address}.\n\n"
        "Please return a JSON object with the following fields:\n"
        "- avgLandPricePerSqFt: Average price per square foot for vacant land in this area\n"
        "- avgAptPricePerSqFt: Average price per square foot for apartments in this area\n\n"
        "Base this on your knowledge of real estate markets. Provide realistic estimates in USD."
    )


class InferenceClient:
    def __init__(self, config: Settings):
        self.config = config
        self.url = f"{config.openai_base_url.rstrip('/')}/chat/completions"

    async def _complete(
        self, system_prompt: str, prompt: str, temperature: float, max_tokens: int
    ) -> str:
        """Send one chat completion and return the reply text."""
        if not self.config.openai_api_key:
            raise InferenceCallError("OpenAI API key not configured")

        payload = {
            "model": self.config.openai_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.openai_api_key}",
        }

        try:
            async with httpx.AsyncClient(timeout=self.config.http_timeout_seconds) as client:
                resp = await client.post(self.url, json=payload, headers=headers)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise InferenceCallError(f"Error calling OpenAI API: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise InferenceCallError(f"Unexpected completion payload: {e!r}") from e

        # Refusals and content-filter hits come back with null content
        if not isinstance(content, str):
            raise InferenceCallError("Completion has no text content")
        return content

    def _parse(self, text: str, model: type[BaseModel]) -> BaseModel:
        data = extract_json(text)
        if data is None:
            logger.debug("Unparseable completion: %s", text)
            raise InferenceParseError("Failed to parse OpenAI response as JSON")
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise InferenceParseError(f"Reply did not match {model.__name__}: {e}") from e

    async def extract_zoning_info(self, address: str, description: str) -> ZoningInfo:
        """Ask the model for zoning constraints of a parcel."""
        text = await self._complete(
            ZONING_SYSTEM_PROMPT,
            _zoning_prompt(address, description),
            temperature=0.2,
            max_tokens=500,
        )
        return self._parse(text, ZoningInfo)

    async def estimate_market_prices(self, address: str) -> MarketEstimate:
        """Ask the model for average land and apartment $/sqft around an address."""
        text = await self._complete(
            MARKET_SYSTEM_PROMPT,
            _market_prompt(address),
            temperature=0.3,
            max_tokens=150,
        )
        return self._parse(text, MarketEstimate)
