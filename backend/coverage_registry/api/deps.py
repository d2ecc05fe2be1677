"""
Dependencies resolving the registry wired onto the running app.
"""

from fastapi import Request

from coverage_registry.access import RoleAuthority
from coverage_registry.ledger import PolicyLedger
from coverage_registry.pricing import PriceReferenceAdapter
from coverage_registry.services.registry_builder import Registry


def get_registry(request: Request) -> Registry:
    return request.app.state.registry


def get_authority(request: Request) -> RoleAuthority:
    return get_registry(request).authority


def get_ledger(request: Request) -> PolicyLedger:
    return get_registry(request).ledger


def get_price_adapter(request: Request) -> PriceReferenceAdapter:
    return get_registry(request).prices
