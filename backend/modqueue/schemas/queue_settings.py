from typing import List

from pydantic import BaseModel, Field

from ..enums import ModderType


class QueueSettingsPublic(BaseModel):
    owner: str
    modder_type: ModderType
    modes: List[str]
    open: bool
    cooldown: float
    max_pending: int

    class Config:
        from_attributes = True


class QueueSettingsUpdate(BaseModel):
    modder_type: ModderType | None = None
    modes: List[str] | None = Field(default=None, min_length=1)
    open: bool | None = None
    cooldown: float | None = Field(default=None, ge=0)
    max_pending: int | None = Field(default=None, ge=1)


class SettingsUpdateRequest(BaseModel):
    settings: QueueSettingsUpdate


class OpenRequest(BaseModel):
    open: bool
    owner: str | None = None
