class PricingError(Exception):
    """Base exception for price reference errors."""


class InvalidReferenceError(PricingError):
    """Raised when the price feed reports a non-positive price."""

    def __init__(self, price: int) -> None:
        self.price = price
        super().__init__(f"Reference price must be positive, got {price}")


class PriceFeedError(PricingError):
    """Raised when the upstream feed cannot produce a quote."""
