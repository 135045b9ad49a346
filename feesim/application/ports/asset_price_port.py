from __future__ import annotations

from typing import Protocol

from feesim.domain.entities.fees import AssetPrices


class AssetPricePort(Protocol):
    def get_prices(self) -> AssetPrices:
        ...
