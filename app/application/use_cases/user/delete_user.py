# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ...validation import UserValidator
from ...dto.user_dto import DeleteOutcomeResponse
from ...exceptions import InternalError, InvalidInputError

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository, user_validator: UserValidator) -> None:
        self.user_repository = user_repository
        self.user_validator = user_validator
    
    async def execute(self, data: Dict[str, Any]) -> DeleteOutcomeResponse:
        """
        Delete a user by ID
        
        Args:
            data: Raw request payload with ``id``
            
        Returns:
            DeleteOutcomeResponse; ``deleted`` is False when no user had this ID
        """
        result = self.user_validator.validate_delete_by_id(data)
        if not result.is_valid:
            raise InvalidInputError(result.error.details)
        
        user_id = result.value[UserFields.ID]
        try:
            outcome = await self.user_repository.delete_by_id(user_id)
        except Exception as e:
            logger.error(f"Failed to delete user {user_id}: {e}", exc_info=True)
            raise InternalError() from e
        
        if outcome.deleted:
            logger.info(f"Deleted user {user_id}")
        
        return DeleteOutcomeResponse(deleted=outcome.deleted)
