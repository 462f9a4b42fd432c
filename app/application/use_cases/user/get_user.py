# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ...validation import UserValidator
from ...dto.user_dto import UserResponse
from ...exceptions import InternalError, InvalidInputError

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository, user_validator: UserValidator) -> None:
        self.user_repository = user_repository
        self.user_validator = user_validator
    
    async def execute(self, user_id: str) -> Optional[UserResponse]:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            UserResponse, or None when no user has this ID
            
        Raises:
            InvalidInputError: If the ID is malformed
            InternalError: On storage failure
        """
        result = self.user_validator.validate_find_by_id({UserFields.ID: user_id})
        if not result.is_valid:
            raise InvalidInputError(result.error.details)
        
        try:
            user = await self.user_repository.find_by_id(result.value[UserFields.ID])
        except Exception as e:
            logger.error(f"Failed to find user {user_id}: {e}", exc_info=True)
            raise InternalError() from e
        
        if user is None:
            return None
        
        return UserResponse(
            id=user.id or "",
            email=user.email,
            full_name=user.full_name,
        )
