# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.outcomes import DeleteOutcome, UpdateOutcome
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateKeyError, RepositoryError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def ensure_indexes(self) -> None:
        """Create the unique index on email"""
        try:
            await self.user_collection.create_index(
                [(UserFields.EMAIL, ASCENDING)],
                unique=True,
                name="email_unique",
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error creating user indexes: {str(e)}") from e
        logger.info("Ensured unique index on users.%s", UserFields.EMAIL)
    
    async def create(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User domain model without an ID
            
        Returns:
            Stored User domain model with ID set
            
        Raises:
            DuplicateKeyError: If the email is already taken
            RepositoryError: On any other storage failure
        """
        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(UserFields.EMAIL) from e
        except PyMongoError as e:
            raise RepositoryError(f"Error creating user: {str(e)}") from e
        
        return User(
            id=str(result.inserted_id),
            email=user.email,
            full_name=user.full_name,
        )
    
    async def find_all(self) -> List[User]:
        """
        Find all users
        
        Returns:
            List of User domain models ordered by insertion
        """
        try:
            cursor = self.user_collection.find({}).sort(UserFields.MONGO_ID, ASCENDING)
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise RepositoryError(f"Error listing users: {str(e)}") from e
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding user by ID: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def update_by_id(self, user_id: str, patch: Dict[str, Any]) -> UpdateOutcome:
        """
        Apply a partial update to a user
        
        Args:
            user_id: ID of the user to update
            patch: Fields to set; identifier fields are ignored
            
        Returns:
            UpdateOutcome with matched and modified counts
            
        Raises:
            RepositoryError: On any storage failure
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return UpdateOutcome(matched_count=0, modified_count=0)
        
        fields = {
            k: v for k, v in patch.items()
            if k not in (UserFields.MONGO_ID, UserFields.ID)
        }
        if not fields:
            raise ValueError("Update patch cannot be empty")
        
        try:
            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": fields}
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error updating user: {str(e)}") from e
        
        return UpdateOutcome(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )
    
    async def delete_by_id(self, user_id: str) -> DeleteOutcome:
        """
        Delete a user
        
        Args:
            user_id: ID of the user to delete
            
        Returns:
            DeleteOutcome with the deleted count
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return DeleteOutcome(deleted_count=0)
        
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting user: {str(e)}") from e
        
        return DeleteOutcome(deleted_count=result.deleted_count)
    
    @staticmethod
    def _to_object_id(user_id: str) -> Optional[ObjectId]:
        if not user_id:
            return None
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            full_name=document.get(UserFields.FULL_NAME, ""),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to a MongoDB document (the _id is left to the server)"""
        return {
            UserFields.EMAIL: user.email,
            UserFields.FULL_NAME: user.full_name,
        }
