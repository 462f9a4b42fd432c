from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.user import User
from ..models.outcomes import DeleteOutcome, UpdateOutcome


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user and return it with its assigned ID

        Raises:
            DuplicateKeyError: If the email is already taken
        """
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users in insertion order"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def update_by_id(self, user_id: str, patch: Dict[str, Any]) -> UpdateOutcome:
        """Apply a partial update to the user with the given ID"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: str) -> DeleteOutcome:
        """Delete the user with the given ID"""
        pass

    async def ensure_indexes(self) -> None:
        """Create backend indexes (no-op unless overridden)"""
        pass
