from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, Field, computed_field

from ..enums import RequestStatus


class RequestCreate(BaseModel):
    id: int = Field(description="Beatmap set id")
    target: str
    comment: str | None = None
    m4m: bool | None = False


class DiffPublic(BaseModel):
    name: str
    mode: str
    sr: float


class RequestPublic(BaseModel):
    id: str
    map_id: int
    title: str
    artist: str
    creator: str
    bpm: float
    length: str
    comment: str
    m4m: bool
    diffs: List[DiffPublic]
    image: str
    user_id: str
    username: str
    target: str
    requested_at: datetime
    archived: bool
    status: str
    feedback: str | None

    class Config:
        from_attributes = True

    @computed_field  # type: ignore[misc]
    @property
    def status_kind(self) -> RequestStatus:
        return RequestStatus.classify(self.status)


class SubmissionResponse(BaseModel):
    """Outcome of a submission: the map as built, plus any rejection reasons."""

    map: dict[str, Any] | RequestPublic
    errors: List[str]


class RequestDelete(BaseModel):
    id: str


class RequestEdit(BaseModel):
    id: str
    feedback: str | None = None
    status: str = Field(default=RequestStatus.PENDING.value, min_length=1, max_length=64)
    archived: bool = False
