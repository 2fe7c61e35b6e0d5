"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when a required field is absent or malformed."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with a uniqueness constraint."""

    def __init__(
        self, resource: str, field: str, value: str, message: str | None = None
    ):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(
            message or f"{resource} with {field} '{value}' already exists"
        )


class HandleAllocationError(ConflictError):
    """Raised when no free handle was found within the attempt bound."""

    def __init__(self, base: str, attempts: int):
        self.attempts = attempts
        super().__init__(
            "Account",
            "handle",
            base,
            message=f"No free handle for base '{base}' after {attempts} attempts",
        )


class StorageError(DomainError):
    """Raised when the backing store fails.

    The message is for logs only; callers get a generic error.
    """

    pass


class SessionResolutionError(DomainError):
    """Raised when a session token cannot be resolved.

    Covers both invalid/expired tokens and an unreachable session store.
    """

    pass


class NotAuthorizedError(DomainError):
    """Raised when an account lacks the role an operation requires."""

    def __init__(self, action: str, handle: str):
        self.action = action
        self.handle = handle
        super().__init__(f"Account {handle} is not authorized to {action}")
