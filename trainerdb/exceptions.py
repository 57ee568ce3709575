"""
Custom exceptions for the trainer repository.
"""


class TrainerDBError(Exception):
    """Base exception for trainer data access errors."""
    pass


class RepositoryError(TrainerDBError):
    """Raised when a repository operation fails at the store level."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")


class TrainerNotFoundError(TrainerDBError):
    """Raised when no trainer matches the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Trainer {key} not found")
