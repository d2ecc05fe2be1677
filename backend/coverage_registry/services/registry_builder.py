from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from coverage_registry.access import RoleAuthority
from coverage_registry.core.config import Settings, settings
from coverage_registry.ledger import EventLog, PolicyLedger
from coverage_registry.pricing import (
    HTTPPriceFeed,
    PriceFeed,
    PriceReferenceAdapter,
    StaticPriceFeed,
)


logger = logging.getLogger("coverage.registry.builder")


@dataclass
class Registry:
    """The wired role authority, price reference and ledger for one service."""

    authority: RoleAuthority
    prices: PriceReferenceAdapter
    ledger: PolicyLedger


def create_price_feed(config: Settings = settings) -> PriceFeed:
    if config.PRICE_FEED_URL:
        logger.info("Using live price feed at %s", config.PRICE_FEED_URL)
        return HTTPPriceFeed(
            url=config.PRICE_FEED_URL,
            decimals=config.REFERENCE_DECIMALS,
            timeout=config.PRICE_FEED_TIMEOUT,
        )
    return StaticPriceFeed(config.REFERENCE_PRICE, config.REFERENCE_DECIMALS)


def create_registry(
    *,
    config: Settings = settings,
    authority: Optional[RoleAuthority] = None,
    price_feed: Optional[PriceFeed] = None,
    events: Optional[EventLog] = None,
    clock=None,
) -> Registry:
    authority = authority or RoleAuthority(config.INITIAL_ADMINS)
    prices = PriceReferenceAdapter(price_feed or create_price_feed(config))

    ledger_kwargs = {
        "events": events or EventLog(),
        "renewal_period": timedelta(days=config.RENEWAL_PERIOD_DAYS),
    }
    if clock is not None:
        ledger_kwargs["clock"] = clock

    ledger = PolicyLedger(authority, prices, **ledger_kwargs)
    logger.info("Registry ready with %d initial administrator(s)", len(authority.admins()))
    return Registry(authority=authority, prices=prices, ledger=ledger)
