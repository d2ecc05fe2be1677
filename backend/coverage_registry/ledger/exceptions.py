from typing import Any, Optional


class LedgerError(Exception):
    """Base exception for policy ledger errors."""


class NotFoundError(LedgerError):
    """Raised when a policy id is out of range or a subscriber has no selections."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_id: Any = None):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(message)


class PolicyValidationError(LedgerError):
    """Raised when a policy definition carries invalid values."""
