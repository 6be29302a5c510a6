from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from ..enums import RequestStatus


class Request(SQLModel, table=True):
    """A mapset accepted into somebody's queue."""

    __tablename__ = "requests"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    map_id: int = Field(index=True)
    title: str
    artist: str
    creator: str
    bpm: float = Field(default=0)
    length: str = Field(default="0:00")
    comment: str = Field(default="")
    m4m: bool = Field(default=False)
    diffs: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    image: str = Field(default="")

    user_id: str = Field(foreign_key="users.id", index=True)
    username: str = Field(default="")
    target: str = Field(index=True)
    requested_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), index=True
    )
    archived: bool = Field(default=False, index=True)
    # owner-assigned, free text
    status: str = Field(default=RequestStatus.PENDING.value, index=True)
    feedback: str | None = Field(default=None)
