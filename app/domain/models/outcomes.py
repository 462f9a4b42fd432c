# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class UpdateOutcome:
    """
    Result of an update-by-id write.

    A zero ``matched_count`` means no record had the given id; it is a
    normal outcome, not an error.
    """
    matched_count: int
    modified_count: int

    @property
    def matched(self) -> bool:
        return self.matched_count > 0

    @property
    def modified(self) -> bool:
        return self.modified_count > 0


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of a delete-by-id write. Zero ``deleted_count`` is not an error."""
    deleted_count: int

    @property
    def deleted(self) -> bool:
        return self.deleted_count > 0
