import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..config import get_settings
from ..models import QueueSettings
from ..schemas.queue_settings import QueueSettingsUpdate

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, owner: str) -> Optional[QueueSettings]:
        statement = select(QueueSettings).where(QueueSettings.owner == owner)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def save(self, owner: str, payload: QueueSettingsUpdate) -> QueueSettings:
        """Apply the given fields to the owner's queue, creating it on first use."""
        queue = await self.get(owner)
        if queue is None:
            defaults = get_settings()
            queue = QueueSettings(
                owner=owner,
                modes=list(defaults.default_modes),
                cooldown=defaults.default_cooldown_days,
                max_pending=defaults.default_max_pending,
            )
            logger.info("Creating queue settings for %s", owner)

        for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(queue, field, value)

        self.session.add(queue)
        await self.session.commit()
        await self.session.refresh(queue)
        return queue

    async def set_open(self, owner: str, is_open: bool) -> Optional[QueueSettings]:
        queue = await self.get(owner)
        if queue is None:
            return None
        queue.open = is_open
        self.session.add(queue)
        await self.session.commit()
        await self.session.refresh(queue)
        logger.info("%s %s their queue", owner, "opened" if is_open else "closed")
        return queue
