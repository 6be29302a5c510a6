from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_session
from ..dependencies import get_admin_user, get_current_user
from ..models import User
from ..osu import OsuClient, get_osu_client
from ..schemas.request import (
    RequestCreate,
    RequestDelete,
    RequestEdit,
    RequestPublic,
    SubmissionResponse,
)
from ..services.request_service import QueueNotFound, RequestService

router = APIRouter(tags=["requests"])


@router.post("/request", response_model=SubmissionResponse)
async def submit_request(
    payload: RequestCreate,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
    osu_client: OsuClient = Depends(get_osu_client),
):
    service = RequestService(session, osu_client)
    try:
        outcome = await service.submit(user=current_user, payload=payload)
    except QueueNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Queue not found") from None

    if outcome.request is not None:
        return SubmissionResponse(map=RequestPublic.model_validate(outcome.request), errors=[])
    map_payload = outcome.candidate.to_dict() if outcome.candidate else {}
    return SubmissionResponse(map=map_payload, errors=outcome.reasons)


@router.get("/requests", response_model=list[RequestPublic])
async def list_requests(
    target: str,
    archived: bool = False,
    session: AsyncSession = Depends(get_session),
):
    service = RequestService(session)
    requests = await service.list_requests(target, archived=archived)
    return [RequestPublic.model_validate(request) for request in requests]


@router.delete("/request")
async def delete_request(
    payload: RequestDelete,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> dict:
    service = RequestService(session)
    await service.delete_request(user=current_user, request_id=payload.id)
    return {}


@router.post("/request-edit", response_model=RequestPublic)
async def edit_request(
    payload: RequestEdit,
    current_user: User = Depends(get_admin_user),
    session: AsyncSession = Depends(get_session),
):
    service = RequestService(session)
    request = await service.get_request(payload.id)
    if not request:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    if request.target != current_user.username:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your queue")
    updated = await service.edit_request(request, editor=current_user, payload=payload)
    return RequestPublic.model_validate(updated)
