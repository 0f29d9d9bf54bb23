"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class EmptySubmissionError(ValidationError):
    """Raised when a question or reply has neither text nor attachment."""

    def __init__(self) -> None:
        super().__init__("Write something or attach a file before posting")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on an item outside their permissions."""

    def __init__(self, action: str, item_id: str, user_id: str | None):
        self.action = action
        self.item_id = item_id
        super().__init__(
            f"User {user_id or 'anonymous'} is not authorized to {action} item {item_id}"
        )
