import asyncio
import logging
import weakref
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy import delete as sa_delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..admission import (
    AdmissionEngine,
    InvalidBeatmapId,
    QueueConfig,
    SubmissionCandidate,
    close_if_full,
    normalize_beatmapset,
)
from ..enums import RequestStatus
from ..models import QueueSettings, Request, User
from ..osu import OsuClient
from ..schemas.request import RequestCreate, RequestEdit

logger = logging.getLogger(__name__)

# Evaluate/insert/close for one target must not interleave, or two
# submissions could both see the queue below capacity. An entry lives only
# while some caller holds a reference to its lock.
_target_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()


def get_target_lock(target: str) -> asyncio.Lock:
    lock = _target_locks.get(target)
    if lock is None:
        lock = asyncio.Lock()
        _target_locks[target] = lock
    return lock


class QueueNotFound(Exception):
    def __init__(self, owner: str) -> None:
        super().__init__(f"No queue settings for {owner}")
        self.owner = owner


@dataclass
class SubmissionOutcome:
    candidate: SubmissionCandidate | None
    reasons: list[str]
    request: Request | None = None

    @property
    def accepted(self) -> bool:
        return self.request is not None


class RequestService:
    def __init__(
        self,
        session: AsyncSession,
        osu_client: OsuClient | None = None,
        engine: AdmissionEngine | None = None,
    ) -> None:
        self.session = session
        self.osu_client = osu_client
        self.engine = engine or AdmissionEngine()

    async def get_settings(self, owner: str) -> Optional[QueueSettings]:
        statement = select(QueueSettings).where(QueueSettings.owner == owner)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_last_request(self, user_id: str, target: str) -> Optional[Request]:
        statement = (
            select(Request)
            .where(Request.user_id == user_id, Request.target == target)
            .order_by(Request.requested_at.desc())
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def count_pending(self, target: str) -> int:
        statement = select(func.count(Request.id)).where(
            Request.target == target,
            Request.status == RequestStatus.PENDING.value,
            Request.archived.is_(False),
        )
        return (await self.session.execute(statement)).scalar() or 0

    async def submit(
        self,
        *,
        user: User,
        payload: RequestCreate,
        now: datetime | None = None,
    ) -> SubmissionOutcome:
        logger.info("%s submitted %s to %s", user.username, payload.id, payload.target)

        if self.osu_client is None:
            raise RuntimeError("RequestService.submit needs an osu! client")

        try:
            rows = await self.osu_client.get_beatmapset(payload.id)
            candidate = normalize_beatmapset(rows, comment=payload.comment, m4m=payload.m4m)
        except InvalidBeatmapId:
            logger.info("%s submitted an invalid beatmap id %s", user.username, payload.id)
            return SubmissionOutcome(candidate=None, reasons=[InvalidBeatmapId.reason])

        settings = await self.get_settings(payload.target)
        if settings is None:
            raise QueueNotFound(payload.target)

        lock = get_target_lock(payload.target)
        async with lock:
            # another submission may have closed the queue while we waited
            await self.session.refresh(settings)
            last_request = await self.get_last_request(user.id, payload.target)

            moment = now or datetime.now(timezone.utc)
            decision = self.engine.evaluate(
                candidate,
                requester=user.username,
                target=payload.target,
                config=QueueConfig.from_settings(settings),
                last_request_at=last_request.requested_at if last_request else None,
                now=moment,
            )
            if decision.reasons:
                logger.info("%s caused these errors: %s", user.username, ", ".join(decision.reasons))
                return SubmissionOutcome(candidate=candidate, reasons=decision.reasons)

            request = Request(
                **candidate.to_record(),
                user_id=user.id,
                username=user.username,
                target=payload.target,
                requested_at=moment,
                archived=False,
                status=RequestStatus.PENDING.value,
            )
            self.session.add(request)
            await self.session.flush()

            pending = await self.count_pending(payload.target)
            if close_if_full(settings, pending):
                logger.info("%s has %s pending requests, now closing requests", payload.target, pending)
                self.session.add(settings)

            await self.session.commit()
            await self.session.refresh(request)

        logger.info("%s successfully requested %s to %s", user.username, request.title, payload.target)
        return SubmissionOutcome(candidate=candidate, reasons=[], request=request)

    async def list_requests(self, target: str, *, archived: bool = False) -> Sequence[Request]:
        statement = (
            select(Request)
            .where(Request.target == target, Request.archived.is_(archived))
            .order_by(Request.requested_at.desc())
        )
        result = await self.session.execute(statement)
        return result.scalars().all()

    async def get_request(self, request_id: str) -> Optional[Request]:
        return await self.session.get(Request, request_id)

    async def delete_request(self, *, user: User, request_id: str) -> int:
        """Delete one of the user's own requests; returns how many rows went away."""
        logger.info("%s deleted their request %s", user.username, request_id)
        result = await self.session.execute(
            sa_delete(Request).where(Request.id == request_id, Request.user_id == user.id)
        )
        await self.session.commit()
        return result.rowcount or 0

    async def edit_request(self, request: Request, *, editor: User, payload: RequestEdit) -> Request:
        logger.info("%s edited request %s", editor.username, request.id)
        request.feedback = payload.feedback
        request.status = payload.status
        request.archived = payload.archived
        self.session.add(request)
        await self.session.commit()
        await self.session.refresh(request)
        return request
