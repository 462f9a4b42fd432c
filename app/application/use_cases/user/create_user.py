# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....domain.exceptions import DuplicateKeyError
from ...validation import UserValidator
from ...dto.user_dto import UserResponse
from ...exceptions import ConflictError, InternalError, InvalidInputError

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository, user_validator: UserValidator) -> None:
        self.user_repository = user_repository
        self.user_validator = user_validator
    
    async def execute(self, profile: Dict[str, Any]) -> UserResponse:
        """
        Create a new user
        
        Args:
            profile: Raw request payload with ``email`` and ``fullName``
            
        Returns:
            UserResponse with the stored user, including its assigned ID
            
        Raises:
            InvalidInputError: If the payload fails validation
            ConflictError: If a user with this email already exists
            InternalError: On any other storage failure
        """
        result = self.user_validator.validate_create(profile)
        if not result.is_valid:
            raise InvalidInputError(result.error.details)
        
        new_user = User(
            id=None,  # Will be set by repository
            email=result.value[UserFields.EMAIL],
            full_name=result.value[UserFields.FULL_NAME],
        )
        
        try:
            saved_user = await self.user_repository.create(new_user)
        except DuplicateKeyError as e:
            logger.info(f"Rejected duplicate user email {new_user.email}")
            raise ConflictError() from e
        except Exception as e:
            logger.error(f"Failed to create user: {e}", exc_info=True)
            raise InternalError() from e
        
        logger.info(f"Created user {saved_user.id}")
        
        return UserResponse(
            id=saved_user.id or "",
            email=saved_user.email,
            full_name=saved_user.full_name,
        )
