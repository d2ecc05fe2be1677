from .events import EventLog, PolicyCreated, PolicySelected
from .exceptions import LedgerError, NotFoundError, PolicyValidationError
from .ledger import PolicyLedger
from .models import Policy, Selection, SelectionHistory

__all__ = [
    "PolicyLedger",
    "Policy",
    "Selection",
    "SelectionHistory",
    "EventLog",
    "PolicyCreated",
    "PolicySelected",
    "LedgerError",
    "NotFoundError",
    "PolicyValidationError",
]
