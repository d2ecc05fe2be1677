from .authority import RoleAuthority
from .exceptions import AccessError, AuthorizationError
from .models import Role, RoleRecord

__all__ = [
    "RoleAuthority",
    "Role",
    "RoleRecord",
    "AccessError",
    "AuthorizationError",
]
