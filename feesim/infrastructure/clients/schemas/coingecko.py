from __future__ import annotations

from pydantic import BaseModel, RootModel


class CurrencyQuote(BaseModel):
    usd: float


class SimplePriceResponse(RootModel[dict[str, CurrencyQuote]]):
    """Payload of `/simple/price`: asset id -> quote; unknown ids are omitted."""

    def usd(self, asset_id: str) -> float | None:
        quote = self.root.get(asset_id)
        return quote.usd if quote is not None else None
