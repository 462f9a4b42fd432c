from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.validation import UserValidator
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers the shared validator and all user use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the user validator (one instance for the process) and the
        user use cases. Use cases are created on-demand via factories.
        """
        container.register_singleton(UserValidator, UserValidator())
        
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository),
                user_validator=container.get(UserValidator),
            )
        )
        
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(
                user_repository=container.get(UserRepository),
                user_validator=container.get(UserValidator),
            )
        )
        
        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository),
                user_validator=container.get(UserValidator),
            )
        )
        
        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository),
                user_validator=container.get(UserValidator),
            )
        )
