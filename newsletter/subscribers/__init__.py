# newsletter/subscribers/__init__.py
from .base import Subscriber
from .inbox import Inbox
from .user import User

__all__ = [
    "Subscriber",
    "Inbox",
    "User",
]
