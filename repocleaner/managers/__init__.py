"""Manager classes for application state."""

from .deletion_manager import (
    AwaitingConfirmation,
    DeletionManager,
    DeletionOutcome,
    DeletionState,
    Idle,
    InFlight,
    Settled,
)
from .notification_manager import Notification, NotificationManager
from .session_manager import RepositorySession
from .view_state_manager import ViewSnapshot, ViewStateStore

__all__ = [
    "AwaitingConfirmation",
    "DeletionManager",
    "DeletionOutcome",
    "DeletionState",
    "Idle",
    "InFlight",
    "Notification",
    "NotificationManager",
    "RepositorySession",
    "Settled",
    "ViewSnapshot",
    "ViewStateStore",
]
