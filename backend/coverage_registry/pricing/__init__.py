from .adapter import PriceReferenceAdapter
from .exceptions import InvalidReferenceError, PriceFeedError, PricingError
from .feeds import HTTPPriceFeed, StaticPriceFeed
from .models import PriceFeed, PriceQuote

__all__ = [
    "PriceReferenceAdapter",
    "PriceFeed",
    "PriceQuote",
    "StaticPriceFeed",
    "HTTPPriceFeed",
    "PricingError",
    "InvalidReferenceError",
    "PriceFeedError",
]
