from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class PriceQuote:
    """A price and its decimal precision, read together from one feed round."""

    value: int
    decimals: int


class PriceFeed(Protocol):
    async def latest_price(self) -> PriceQuote:
        ...
