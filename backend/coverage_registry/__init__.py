"""Insurance policy registry with role-gated administration and price-referenced premiums."""

__version__ = "1.0.0"
