from __future__ import annotations

from typing import Protocol


class SimulationInputPort(Protocol):
    def read_chain_selection(self) -> int:
        ...

    def read_days(self) -> int:
        ...

    def read_min_gas_price(self) -> float:
        ...

    def read_max_gas_price(self) -> float:
        ...

    def read_l1_gas_used(self) -> int:
        ...

    def read_min_l2_gas_price(self) -> float:
        ...

    def read_max_l2_gas_price(self) -> float:
        ...

    def read_l2_gas_used(self) -> int:
        ...

    def read_l2_gas_price(self) -> float:
        ...

    def read_l1_gas_price(self) -> float:
        ...

    def read_overhead(self) -> float:
        ...
