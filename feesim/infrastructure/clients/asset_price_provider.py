from __future__ import annotations

from feesim.application.ports.asset_price_port import AssetPricePort
from feesim.domain.entities.fees import Asset, AssetPrices
from feesim.domain.exceptions import PriceFeedError
from feesim.infrastructure.clients.pricing import PriceLookupError, PriceService


class PriceServiceAdapter(AssetPricePort):
    def __init__(self, price_service: PriceService):
        self._price_service = price_service

    def get_prices(self) -> AssetPrices:
        try:
            prices = self._price_service.get_prices_usd(
                [Asset.ETHEREUM.value, Asset.MANTLE.value]
            )
        except PriceLookupError as exc:
            raise PriceFeedError(str(exc)) from exc
        return AssetPrices(
            eth_usd=prices[Asset.ETHEREUM.value],
            mnt_usd=prices[Asset.MANTLE.value],
        )
