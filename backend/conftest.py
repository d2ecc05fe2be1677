"""
Global pytest configuration and fixtures.
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ["TESTING"] = "1"

ADMIN = "admin-alice"
USER = "user-bob"
OUTSIDER = "mallory"
FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock returning a constant instant so due dates are predictable."""
    return lambda: FIXED_NOW


@pytest.fixture
def authority():
    from coverage_registry.access import RoleAuthority

    authority = RoleAuthority([ADMIN])
    authority.add_user(ADMIN, USER)
    return authority


@pytest.fixture
def price_feed():
    """Static feed quoting 2.00000000 per unit (8 decimals)."""
    from coverage_registry.pricing import StaticPriceFeed

    return StaticPriceFeed(200_000_000, 8)


@pytest.fixture
def price_adapter(price_feed):
    from coverage_registry.pricing import PriceReferenceAdapter

    return PriceReferenceAdapter(price_feed)


@pytest.fixture
def ledger(authority, price_adapter, fixed_clock):
    from coverage_registry.ledger import PolicyLedger

    return PolicyLedger(authority, price_adapter, clock=fixed_clock)


@pytest.fixture
def registry(authority, price_feed, fixed_clock):
    from coverage_registry.services.registry_builder import create_registry

    return create_registry(authority=authority, price_feed=price_feed, clock=fixed_clock)


@pytest.fixture
def client(registry):
    """Test client bound to an app wired with the test registry."""
    from fastapi.testclient import TestClient
    from main import create_app

    with TestClient(create_app(registry)) as test_client:
        yield test_client


# Sample data fixtures
@pytest.fixture
def sample_policy():
    return {
        "plan": "Comprehensive Motor",
        "base_rate": "2.5%",
        "deductible": 500,
        "coverage": 250_000,
        "liability": 1_000_000,
        "cover_items": ["collision", "theft", "fire"],
    }
