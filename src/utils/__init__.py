"""
Utility modules for the Forever Box bot.
"""

from .logging import get_logger
from .rwlock import AsyncRWLock
from .app_state import AppState

__all__ = [
    "get_logger",
    "AsyncRWLock",
    "AppState",
]
