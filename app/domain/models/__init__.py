from .user import User
from .outcomes import UpdateOutcome, DeleteOutcome

__all__ = ["User", "UpdateOutcome", "DeleteOutcome"]
