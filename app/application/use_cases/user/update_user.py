# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ...validation import UserValidator
from ...dto.user_dto import UpdateOutcomeResponse
from ...exceptions import InternalError, InvalidInputError

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user's full name"""
    
    def __init__(self, user_repository: UserRepository, user_validator: UserValidator) -> None:
        self.user_repository = user_repository
        self.user_validator = user_validator
    
    async def execute(self, data: Dict[str, Any]) -> UpdateOutcomeResponse:
        """
        Update a user by ID
        
        Args:
            data: Raw request payload with ``id`` and ``fullName``
            
        Returns:
            UpdateOutcomeResponse; ``matched`` is False when no user has this ID
            
        Raises:
            InvalidInputError: If the payload fails validation
            InternalError: On storage failure
        """
        result = self.user_validator.validate_update_by_id(data)
        if not result.is_valid:
            raise InvalidInputError(result.error.details)
        
        user_id = result.value[UserFields.ID]
        patch = {UserFields.FULL_NAME: result.value[UserFields.FULL_NAME]}
        
        try:
            outcome = await self.user_repository.update_by_id(user_id, patch)
        except Exception as e:
            logger.error(f"Failed to update user {user_id}: {e}", exc_info=True)
            raise InternalError() from e
        
        if outcome.matched:
            logger.info(f"Updated user {user_id} (modified={outcome.modified})")
        else:
            logger.info(f"Update skipped, user {user_id} not found")
        
        return UpdateOutcomeResponse(matched=outcome.matched, modified=outcome.modified)
