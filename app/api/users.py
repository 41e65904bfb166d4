from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from app.dependencies import get_user_service
from app.exceptions import InvalidArgumentError, NotFoundError
from app.services.user_service import UserService
from app.schemas.user import UserCreate, UserUpdate, UserResponse
from app.utils.text import is_blank

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user"
)
def create_user(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service)
):
    """
    Create a new user.

    - **name**: User name (required)
    - **email**: Email address, unique ignoring case (required)
    - **role**: Role name (optional, defaults to USER)
    """
    try:
        return service.create(user_data)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get(
    "/",
    response_model=list[UserResponse],
    summary="List all users"
)
def list_users(
    role: Optional[str] = Query(None, description="Filter by role"),
    service: UserService = Depends(get_user_service)
):
    """Get every user, optionally restricted to one role."""
    if not is_blank(role):
        return service.get_by_role(role)
    return service.get_all()


@router.get(
    "/search/email",
    response_model=UserResponse,
    summary="Get user by email"
)
def get_user_by_email(
    email: str = Query(..., description="Email address, case-insensitive"),
    service: UserService = Depends(get_user_service)
):
    user = service.get_by_email(email)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found with email: {email}"
        )

    return user


@router.get(
    "/search/role",
    response_model=list[UserResponse],
    summary="Get users by role"
)
def get_users_by_role(
    role: str = Query(..., description="Role name, case-insensitive"),
    service: UserService = Depends(get_user_service)
):
    return service.get_by_role(role)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID"
)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """Get a user by ID."""
    user = service.get_by_id(user_id)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found with id: {user_id}"
        )

    return user


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="Update user details. Only provided, non-blank fields will be updated."
)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    try:
        return service.update(user_id, user_data)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user"
)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """Delete a user."""
    try:
        service.delete(user_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return None
