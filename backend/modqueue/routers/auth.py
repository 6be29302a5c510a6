import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..database import get_session
from ..models import User
from ..schemas.auth import LoginRequest, RegisterRequest, Token
from ..schemas.user import UserPublic
from ..security import get_password_hash, issue_access_token, verify_password

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _token_for(user: User) -> Token:
    token_value, expires_at = issue_access_token(user.id, user.username)
    return Token(
        access_token=token_value,
        expires_at=expires_at,
        user=UserPublic.model_validate(user),
    )


@router.post("/register", response_model=Token)
async def register_user(payload: RegisterRequest, session: AsyncSession = Depends(get_session)):
    username = payload.username.strip()
    existing = (await session.execute(select(User).where(User.username == username))).scalar_one_or_none()
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="username is already taken")

    user = User(username=username, hashed_password=get_password_hash(payload.password))
    session.add(user)
    await session.commit()
    await session.refresh(user)
    logger.info("Registered %s", user.username)
    return _token_for(user)


@router.post("/login", response_model=Token)
async def login(payload: LoginRequest, session: AsyncSession = Depends(get_session)):
    statement = select(User).where(User.username == payload.username)
    result = await session.execute(statement)
    user = result.scalar_one_or_none()
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Wrong username or password")
    return _token_for(user)
