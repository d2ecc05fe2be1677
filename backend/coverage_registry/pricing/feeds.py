from __future__ import annotations

import logging
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Any, Optional

import httpx

from .exceptions import PriceFeedError
from .models import PriceQuote

logger = logging.getLogger(__name__)


class StaticPriceFeed:
    """In-memory feed holding a single reference quote."""

    def __init__(self, value: int, decimals: int = 8) -> None:
        self._quote = self._build_quote(value, decimals)

    async def latest_price(self) -> PriceQuote:
        return self._quote

    def set_price(self, value: int, decimals: Optional[int] = None) -> None:
        # Swap the whole quote so readers never see a mixed value/decimals pair
        self._quote = self._build_quote(
            value, self._quote.decimals if decimals is None else decimals
        )

    @staticmethod
    def _build_quote(value: int, decimals: int) -> PriceQuote:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"price must be an integer, got {value!r}")
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ValueError(f"decimals must be a non-negative integer, got {decimals!r}")
        return PriceQuote(value=value, decimals=decimals)


class HTTPPriceFeed:
    """Reads the latest price from a JSON endpoint exposing a ``price`` field.

    The price is scaled to ``decimals`` places and truncated to an integer so it
    matches the fixed-point quotes produced by on-chain style feeds.
    """

    def __init__(
        self,
        url: str,
        decimals: int = 8,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if decimals < 0:
            raise ValueError("decimals cannot be negative")
        self.url = url
        self.decimals = decimals
        self.timeout = timeout
        self._client = client

    async def latest_price(self) -> PriceQuote:
        payload = await self._fetch()
        value = self._scale(payload)
        logger.debug("Fetched reference price %s from %s", value, self.url)
        return PriceQuote(value=value, decimals=self.decimals)

    async def _fetch(self) -> Any:
        try:
            if self._client is not None:
                response = await self._client.get(self.url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(self.url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as exc:
            logger.error("Price feed request failed: %s", exc)
            raise PriceFeedError(f"Price feed request to {self.url} failed: {exc}") from exc
        except ValueError as exc:
            raise PriceFeedError(f"Price feed at {self.url} returned invalid JSON") from exc

    def _scale(self, payload: Any) -> int:
        try:
            raw = Decimal(str(payload["price"]))
            if not raw.is_finite():
                raise PriceFeedError(f"Price feed at {self.url} returned non-finite price {raw}")
            scaled = (raw * (Decimal(10) ** self.decimals)).to_integral_value(rounding=ROUND_DOWN)
            return int(scaled)
        except (KeyError, TypeError, InvalidOperation) as exc:
            raise PriceFeedError(f"Price feed at {self.url} returned no usable price") from exc
