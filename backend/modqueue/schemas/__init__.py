from .auth import RegisterRequest, LoginRequest, Token
from .user import UserPublic
from .request import (
    RequestCreate,
    RequestPublic,
    RequestDelete,
    RequestEdit,
    DiffPublic,
    SubmissionResponse,
)
from .queue_settings import (
    QueueSettingsPublic,
    QueueSettingsUpdate,
    SettingsUpdateRequest,
    OpenRequest,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "Token",
    "UserPublic",
    "RequestCreate",
    "RequestPublic",
    "RequestDelete",
    "RequestEdit",
    "DiffPublic",
    "SubmissionResponse",
    "QueueSettingsPublic",
    "QueueSettingsUpdate",
    "SettingsUpdateRequest",
    "OpenRequest",
]
