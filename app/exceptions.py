class StoreError(Exception):
    """Base exception for store operations."""
    pass


class NotFoundError(StoreError):
    """Exception raised when the referenced record doesn't exist."""

    def __init__(self, entity: str, identifier):
        super().__init__(f"{entity} not found with id: {identifier}")
        self.entity = entity
        self.identifier = identifier


class InvalidArgumentError(StoreError):
    """Exception raised when a payload violates an entity invariant."""
    pass


class DuplicateEmailError(InvalidArgumentError):
    """Exception raised when an email already belongs to another user."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email


class InsufficientStockError(InvalidArgumentError):
    """Exception raised when a decrease would drive stock below zero."""

    def __init__(self, available: int, requested: int):
        super().__init__(
            f"Insufficient stock. Available: {available}, Requested: {requested}"
        )
        self.available = available
        self.requested = requested
