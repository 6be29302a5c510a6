from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_session
from ..dependencies import get_admin_user
from ..models import User
from ..schemas.queue_settings import OpenRequest, QueueSettingsPublic, SettingsUpdateRequest
from ..services.settings_service import SettingsService

router = APIRouter(tags=["settings"])


@router.get("/settings", response_model=QueueSettingsPublic)
async def read_settings(owner: str, session: AsyncSession = Depends(get_session)):
    queue = await SettingsService(session).get(owner)
    if not queue:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Queue not found")
    return QueueSettingsPublic.model_validate(queue)


@router.post("/settings", response_model=QueueSettingsPublic)
async def update_settings(
    payload: SettingsUpdateRequest,
    current_user: User = Depends(get_admin_user),
    session: AsyncSession = Depends(get_session),
):
    queue = await SettingsService(session).save(current_user.username, payload.settings)
    return QueueSettingsPublic.model_validate(queue)


@router.post("/open", response_model=QueueSettingsPublic)
async def set_open(
    payload: OpenRequest,
    current_user: User = Depends(get_admin_user),
    session: AsyncSession = Depends(get_session),
):
    owner = payload.owner or current_user.username
    if owner != current_user.username:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your queue")
    queue = await SettingsService(session).set_open(owner, payload.open)
    if not queue:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Queue not found")
    return QueueSettingsPublic.model_validate(queue)
