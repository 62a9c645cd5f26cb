import uuid
from fastapi import APIRouter, Depends, status

from app.dependencies import get_current_claims, get_user_service
from app.models.claims import Claims
from app.services.user_service import UserService
from app.schemas.user_schemas import UserUpdate, UserEnvelope, UserListResponse

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    claims: Claims = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
):
    """Get all users"""
    users = service.list_users()
    return UserListResponse(users=users, total=len(users))


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_user(
    user_id: uuid.UUID,
    claims: Claims = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
):
    """Get specific user details"""
    return {"user": service.get_user(user_id)}


@router.put("/{user_id}", response_model=UserEnvelope)
async def update_user(
    user_id: uuid.UUID,
    data: UserUpdate,
    claims: Claims = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
):
    """Rename the authenticated user"""
    return {"user": service.update_user(user_id, data, claims)}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: uuid.UUID,
    claims: Claims = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
):
    """Delete the authenticated user's account"""
    service.delete_user(user_id, claims)
    return None
