from datetime import datetime

from pydantic import BaseModel


class UserPublic(BaseModel):
    id: str
    username: str
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True
