from __future__ import annotations

import logging
from typing import Iterable, Set, Tuple

from .exceptions import AuthorizationError
from .models import Role, RoleRecord

logger = logging.getLogger(__name__)


class RoleAuthority:
    """Administrator and User flags per identity, granted by administrators only.

    Flags are add-only: there is no revoke operation, so the initial
    administrator set can never shrink.
    """

    def __init__(self, initial_admins: Iterable[str]) -> None:
        admins = {identity for identity in initial_admins if identity}
        if not admins:
            raise ValueError("RoleAuthority requires at least one initial administrator")
        self._admins: Set[str] = admins
        self._users: Set[str] = set()

    def is_admin(self, identity: str) -> bool:
        return identity in self._admins

    def is_user(self, identity: str) -> bool:
        return identity in self._users

    def roles_of(self, identity: str) -> RoleRecord:
        return RoleRecord(
            identity=identity,
            is_admin=self.is_admin(identity),
            is_user=self.is_user(identity),
        )

    def admins(self) -> Tuple[str, ...]:
        return tuple(sorted(self._admins))

    def users(self) -> Tuple[str, ...]:
        return tuple(sorted(self._users))

    def require_admin(self, caller: str, operation: str) -> None:
        if not self.is_admin(caller):
            logger.warning(
                "Denied %s: caller is not an administrator",
                operation,
                extra={"caller": caller},
            )
            raise AuthorizationError(caller, Role.ADMINISTRATOR.value, operation)

    def require_user(self, identity: str, operation: str) -> None:
        if not self.is_user(identity):
            logger.warning(
                "Denied %s: identity is not a user",
                operation,
                extra={"identity": identity},
            )
            raise AuthorizationError(identity, Role.USER.value, operation)

    def add_admin(self, caller: str, identity: str) -> None:
        self.require_admin(caller, "grant the administrator role")
        self._admins.add(identity)
        logger.info("Administrator role granted", extra={"caller": caller, "identity": identity})

    def add_user(self, caller: str, identity: str) -> None:
        self.require_admin(caller, "grant the user role")
        self._users.add(identity)
        logger.info("User role granted", extra={"caller": caller, "identity": identity})
