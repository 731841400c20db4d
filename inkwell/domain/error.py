"""Domain layer errors."""

from inkwell.domain.value import CommentState


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when submitted fields are missing or malformed.

    Carries every offending field so callers can correct all of them at once.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        self.fields = list(errors)
        super().__init__(
            "Invalid fields: "
            + ", ".join(f"{field} ({reason})" for field, reason in errors.items())
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidReferenceError(DomainError):
    """Raised when a comment references a parent it may not reply to."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidStateTransitionError(DomainError):
    """Raised when a moderation action is not allowed from the current state."""

    def __init__(self, comment_id: str, current: CommentState, target: CommentState):
        self.comment_id = comment_id
        self.current = current
        self.target = target
        super().__init__(
            f"Comment {comment_id} cannot move from {current.value} to {target.value}"
        )


class NotAuthorizedError(DomainError):
    """Raised when an identity lacks the role required for an operation."""

    def __init__(self, action: str, account_id: str):
        super().__init__(f"Account {account_id} is not authorized to {action}")


class StorageError(DomainError):
    """Raised when the underlying persistence layer fails.

    The message is for server-side logs only and must never reach a response body.
    """

    pass
