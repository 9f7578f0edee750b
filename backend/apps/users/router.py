"""Users API Router."""
from fastapi import APIRouter, Depends

from apps.users.auth import get_current_user
from apps.users.models import UserResponse
from apps.users.tables import User

router = APIRouter(prefix="/api/auth", tags=["Users"])


@router.get("/user", response_model=UserResponse)
async def current_user(user: User = Depends(get_current_user)):
    return UserResponse.model_validate(user)
