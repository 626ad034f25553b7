"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a unique value (email, username) is already taken."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials don't match."""

    pass


class SecondaryEffectError(DomainError):
    """A best-effort side effect failed after the primary mutation succeeded.

    Never surfaced to the caller. Instances are logged and collected so the
    caller can inspect what drifted.
    """

    def __init__(self, effect: str, subject_id: str, cause: BaseException):
        self.effect = effect
        self.subject_id = subject_id
        self.cause = cause
        super().__init__(f"{effect} failed for {subject_id}: {cause}")
