# Standard library imports
from typing import Any, Dict

# External package imports
from fastapi import APIRouter, Body, status

# Local application imports
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.get("")
async def list_users() -> Dict[str, Any]:
    """
    List all users
    
    Returns:
        ``{"data": [user, ...]}``
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    users = await list_users_use_case.execute()
    return {"data": [user.model_dump(by_alias=True) for user in users]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(payload: Any = Body(None)) -> Dict[str, Any]:
    """
    Create a new user
    
    Args:
        payload: JSON body with ``email`` and ``fullName``
        
    Returns:
        ``{"data": user}`` with the assigned ID
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    user = await create_user_use_case.execute(payload)
    return {"data": user.model_dump(by_alias=True)}


@router.get("/{user_id}")
async def get_user(user_id: str) -> Dict[str, Any]:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        ``{"data": user}``, or ``{"data": null}`` when no user has this ID
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    user = await get_user_use_case.execute(user_id)
    return {"data": user.model_dump(by_alias=True) if user is not None else None}


@router.put("")
async def update_user(payload: Any = Body(None)) -> Dict[str, Any]:
    """
    Update a user's full name
    
    Args:
        payload: JSON body with ``id`` and ``fullName``
        
    Returns:
        ``{"data": {"matched": bool, "modified": bool}}``
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    outcome = await update_user_use_case.execute(payload)
    return {"data": outcome.model_dump()}


@router.delete("")
async def delete_user(payload: Any = Body(None)) -> Dict[str, Any]:
    """
    Delete a user by ID
    
    Args:
        payload: JSON body with ``id``
        
    Returns:
        ``{"data": {"deleted": bool}}``
    """
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    outcome = await delete_user_use_case.execute(payload)
    return {"data": outcome.model_dump()}
