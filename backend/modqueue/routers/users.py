from fastapi import APIRouter, Depends

from ..dependencies import get_current_user, get_optional_user
from ..models import User
from ..schemas.user import UserPublic

router = APIRouter(tags=["users"])


@router.get("/users/me", response_model=UserPublic)
async def read_current_user(current_user: User = Depends(get_current_user)) -> User:
    return current_user


@router.get("/whoami")
async def whoami(current_user: User | None = Depends(get_optional_user)) -> dict:
    if current_user is None:
        return {}
    return UserPublic.model_validate(current_user).model_dump(mode="json")
