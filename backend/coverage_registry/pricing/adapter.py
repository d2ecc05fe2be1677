from __future__ import annotations

import logging

from .exceptions import InvalidReferenceError
from .models import PriceFeed, PriceQuote

logger = logging.getLogger(__name__)


class PriceReferenceAdapter:
    """Converts nominal amounts into the target unit using the feed's latest rate."""

    def __init__(self, feed: PriceFeed) -> None:
        self._feed = feed

    async def latest_quote(self) -> PriceQuote:
        quote = await self._feed.latest_price()
        if quote.value <= 0:
            logger.error("Rejected non-positive reference price %s", quote.value)
            raise InvalidReferenceError(quote.value)
        return quote

    async def convert(self, nominal_amount: int) -> int:
        """Return ``nominal_amount * 10**decimals // price``.

        Floor division: results truncate toward zero.
        """
        if isinstance(nominal_amount, bool) or not isinstance(nominal_amount, int) or nominal_amount < 0:
            raise ValueError(f"nominal_amount must be a non-negative integer, got {nominal_amount!r}")
        quote = await self.latest_quote()
        return nominal_amount * 10 ** quote.decimals // quote.value
