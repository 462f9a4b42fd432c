"""
Exceptions raised by persistence gateways.

These describe storage-level failures in backend-agnostic terms. They are
reclassified by the use cases and never reach the API layer.
"""


class RepositoryError(Exception):
    """Raised when the storage backend fails to complete an operation."""
    pass


class DuplicateKeyError(RepositoryError):
    """Raised when a write violates a uniqueness constraint."""

    def __init__(self, field: str, message: str = "") -> None:
        super().__init__(message or f"Duplicate value for unique field '{field}'")
        self.field = field
