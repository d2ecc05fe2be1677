class AccessError(Exception):
    """Base exception for role authority errors."""


class AuthorizationError(AccessError):
    """Raised when a caller lacks the role a mutating operation requires."""

    def __init__(self, identity: str, required_role: str, operation: str) -> None:
        self.identity = identity
        self.required_role = required_role
        self.operation = operation
        super().__init__(f"'{identity}' must hold the {required_role} role to {operation}")
