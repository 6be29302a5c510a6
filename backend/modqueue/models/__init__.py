from .user import User
from .request import Request
from .queue_settings import QueueSettings

__all__ = [
    "User",
    "Request",
    "QueueSettings",
]
