from uuid import uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from ..enums import ModderType


class QueueSettings(SQLModel, table=True):
    __tablename__ = "queue_settings"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    owner: str = Field(index=True, unique=True)
    modder_type: ModderType = Field(default=ModderType.MODDER)
    modes: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    open: bool = Field(default=False)
    cooldown: float = Field(default=0, ge=0)
    max_pending: int = Field(default=10, ge=0)
