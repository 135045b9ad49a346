from __future__ import annotations

import re
import sys
from typing import Callable

from feesim.domain.exceptions import InputParseError


UNSIGNED_PATTERN = re.compile(r"^\+?[0-9]+$")
SIGNED_PATTERN = re.compile(r"^[+-]?[0-9]+$")
U64_MAX = 2**64 - 1

CHAIN_PROMPT = "Select chain for gas calculation:\n1: Ethereum\n2: Mantle"


def _stdin_line() -> str:
    return sys.stdin.readline()


class ConsolePromptInput:
    """
    Prompts on stdout and reads one line per value.

    Every read returns a fresh value; a line that does not parse raises
    InputParseError naming the prompt.
    """

    def __init__(
        self,
        *,
        read_line: Callable[[], str] = _stdin_line,
        write: Callable[[str], None] = print,
    ):
        self._read_line = read_line
        self._write = write

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        raw = self._read_line()
        if raw == "":
            raise InputParseError(f"No input received for: {prompt.strip()}")
        return raw.strip()

    def _ask_unsigned(self, prompt: str, error: str) -> int:
        raw = self._ask(prompt)
        if not UNSIGNED_PATTERN.match(raw):
            raise InputParseError(f"{error} (got {raw!r})")
        value = int(raw)
        if value > U64_MAX:
            raise InputParseError(f"{error} (got {raw!r})")
        return value

    def _ask_float(self, prompt: str, error: str = "Please enter a valid number") -> float:
        raw = self._ask(prompt)
        # float() also takes digit separators and non-ASCII digits
        if "_" in raw or not raw.isascii():
            raise InputParseError(f"{error} (got {raw!r})")
        try:
            return float(raw)
        except ValueError as exc:
            raise InputParseError(f"{error} (got {raw!r})") from exc

    def read_chain_selection(self) -> int:
        raw = self._ask(CHAIN_PROMPT)
        if not SIGNED_PATTERN.match(raw):
            raise InputParseError(f"Please select a valid option (got {raw!r})")
        return int(raw)

    def read_days(self) -> int:
        return self._ask_unsigned(
            "Enter the number of days for the simulation: ",
            "Please enter a valid number",
        )

    def read_min_gas_price(self) -> float:
        return self._ask_float("Enter the minimum gas price (in Gwei): ")

    def read_max_gas_price(self) -> float:
        return self._ask_float("Enter the maximum gas price (in Gwei): ")

    def read_l1_gas_used(self) -> int:
        return self._ask_unsigned(
            "Enter the Ethereum gas used: ",
            "Please enter a valid number for Ethereum gas used",
        )

    def read_min_l2_gas_price(self) -> float:
        return self._ask_float("Enter the minimum L2 gas price (in Gwei): ")

    def read_max_l2_gas_price(self) -> float:
        return self._ask_float("Enter the maximum L2 gas price (in Gwei): ")

    def read_l2_gas_used(self) -> int:
        return self._ask_unsigned(
            "Enter the L2 gas used: ",
            "Please enter a valid number for L2 gas used",
        )

    def read_l2_gas_price(self) -> float:
        return self._ask_float("Enter the L2 gas price (in Gwei): ")

    def read_l1_gas_price(self) -> float:
        return self._ask_float("Enter the L1 gas price (in Gwei): ")

    def read_overhead(self) -> float:
        return self._ask_float("Enter the L1 overhead: ", "Please enter a valid number for L1 overhead")
