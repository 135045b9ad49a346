from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

from feesim.domain.entities.fees import FeeStrategy


load_dotenv()

T = TypeVar("T")


class ConfigError(ValueError):
    """An environment variable holds a value that cannot be used."""


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _parsed(name: str, default: str, parser: Callable[[str], T]) -> T:
    value = _env(name, default)
    try:
        return parser(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}={value!r}: {exc}") from exc


def _json_object(value: str) -> dict:
    if not value:
        return {}
    data = json.loads(value)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def _optional_int(value: str) -> int | None:
    if not value.strip():
        return None
    return int(value)


def _fee_strategy(value: str) -> FeeStrategy:
    return FeeStrategy(value.strip().lower())


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError("unknown logging level")
    return level


@dataclass(frozen=True)
class Settings:
    price_overrides: dict
    coingecko_api_base: str
    coingecko_timeout_seconds: float
    mantle_fee_strategy: FeeStrategy
    random_seed: int | None
    log_level: str


def get_settings() -> Settings:
    return Settings(
        price_overrides=_parsed("PRICE_OVERRIDES", "", _json_object),
        coingecko_api_base=_env("COINGECKO_API_BASE", "https://api.coingecko.com/api/v3"),
        coingecko_timeout_seconds=_parsed("COINGECKO_TIMEOUT_SECONDS", "10", float),
        mantle_fee_strategy=_parsed("MANTLE_FEE_STRATEGY", FeeStrategy.SIMPLE_BLENDED.value, _fee_strategy),
        random_seed=_parsed("FEESIM_RANDOM_SEED", "", _optional_int),
        log_level=_parsed("LOG_LEVEL", "WARNING", _log_level),
    )
