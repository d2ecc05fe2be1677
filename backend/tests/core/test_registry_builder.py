from datetime import timedelta

import pytest

from coverage_registry.core.config import Settings
from coverage_registry.pricing import HTTPPriceFeed, PriceQuote, StaticPriceFeed
from coverage_registry.services.registry_builder import create_price_feed, create_registry


def test_static_feed_used_without_url():
    feed = create_price_feed(Settings(REFERENCE_PRICE=150, REFERENCE_DECIMALS=2))

    assert isinstance(feed, StaticPriceFeed)


def test_http_feed_used_with_url():
    config = Settings(PRICE_FEED_URL="https://prices.example.com/eth", PRICE_FEED_TIMEOUT=2.5)

    feed = create_price_feed(config)

    assert isinstance(feed, HTTPPriceFeed)
    assert feed.url == "https://prices.example.com/eth"
    assert feed.decimals == 8
    assert feed.timeout == 2.5


@pytest.mark.asyncio
async def test_registry_wired_from_settings():
    config = Settings(
        INITIAL_ADMINS="root,ops",
        REFERENCE_PRICE=400,
        REFERENCE_DECIMALS=2,
        RENEWAL_PERIOD_DAYS=30,
    )

    registry = create_registry(config=config)

    assert registry.authority.admins() == ("ops", "root")
    assert await registry.prices.latest_quote() == PriceQuote(value=400, decimals=2)
    assert registry.ledger.policy_count == 0


@pytest.mark.asyncio
async def test_registry_uses_configured_renewal_period(fixed_clock):
    registry = create_registry(
        config=Settings(INITIAL_ADMINS="root", RENEWAL_PERIOD_DAYS=30),
        clock=fixed_clock,
    )
    registry.authority.add_user("root", "bob")
    registry.ledger.create_policy("root", "Pet", "3%", 0, 1000, 0, ["vet"])

    selection = await registry.ledger.select_policy("bob", 1, 10)

    assert selection.due_date == fixed_clock() + timedelta(days=30)
