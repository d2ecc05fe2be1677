from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    ADMINISTRATOR = "administrator"
    USER = "user"


@dataclass(frozen=True)
class RoleRecord:
    """Snapshot of the role flags held by one identity."""

    identity: str
    is_admin: bool = False
    is_user: bool = False
