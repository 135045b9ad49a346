from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from feesim.infrastructure.clients.schemas.coingecko import SimplePriceResponse


logger = logging.getLogger(__name__)


class PriceLookupError(RuntimeError):
    pass


def _normalize_asset_id(value: str) -> str:
    return value.strip().lower()


@dataclass(frozen=True)
class PriceOverrides:
    data: dict

    def get_price(self, asset_id: str) -> float | None:
        if not isinstance(self.data, dict):
            return None
        value = self.data.get(asset_id)
        if value is None:
            value = self.data.get(_normalize_asset_id(asset_id))
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise PriceLookupError(f"Invalid price override for {asset_id}: {value!r}") from exc


class CoingeckoPriceProvider:
    def __init__(
        self,
        api_base: str,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout_seconds
        self._transport = transport

    def get_prices_usd(self, asset_ids: list[str]) -> dict[str, float]:
        url = f"{self.api_base}/simple/price"
        params = {
            "ids": ",".join(asset_ids),
            "vs_currencies": "usd",
        }
        logger.info("coingecko: fetching prices ids=%s", params["ids"])
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(url, params=params)
                response.raise_for_status()
                payload = SimplePriceResponse.model_validate(response.json())
        except httpx.HTTPError as exc:
            raise PriceLookupError(f"Price feed request failed: {exc}") from exc
        except ValidationError as exc:
            raise PriceLookupError(f"Malformed price feed response: {exc}") from exc
        except ValueError as exc:
            raise PriceLookupError(f"Price feed returned invalid JSON: {exc}") from exc

        prices: dict[str, float] = {}
        for asset_id in asset_ids:
            value = payload.usd(asset_id)
            if value is None:
                raise PriceLookupError(f"Price not found for {asset_id}.")
            prices[asset_id] = value
        logger.info("coingecko: prices=%s", prices)
        return prices


class PriceService:
    def __init__(self, overrides: PriceOverrides, coingecko: CoingeckoPriceProvider):
        self.overrides = overrides
        self.coingecko = coingecko

    def get_prices_usd(self, asset_ids: list[str]) -> dict[str, float]:
        prices: dict[str, float] = {}
        missing: list[str] = []
        for asset_id in asset_ids:
            override = self.overrides.get_price(asset_id)
            if override is not None:
                logger.info("price_service: using override asset=%s usd=%s", asset_id, override)
                prices[asset_id] = override
            else:
                missing.append(asset_id)
        if missing:
            prices.update(self.coingecko.get_prices_usd(missing))
        return prices
