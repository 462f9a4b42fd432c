# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...exceptions import InternalError

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Use case for listing all users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> List[UserResponse]:
        """
        List all users
        
        Returns:
            List of UserResponse objects, empty when there are no users
        """
        try:
            users = await self.user_repository.find_all()
        except Exception as e:
            logger.error(f"Failed to list users: {e}", exc_info=True)
            raise InternalError() from e
        
        return [
            UserResponse(
                id=user.id or "",
                email=user.email,
                full_name=user.full_name,
            )
            for user in users
        ]
