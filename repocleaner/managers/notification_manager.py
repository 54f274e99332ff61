"""Collects user-facing notifications and fans them out to listeners."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Literal

logger = logging.getLogger("RepoCleaner.NotificationManager")

Variant = Literal["default", "destructive"]


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""
    variant: Variant = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"

    @property
    def message(self) -> str:
        if self.description:
            return f"{self.title}: {self.description}"
        return self.title


class NotificationManager:
    """Records notifications and forwards each one to every subscriber."""

    def __init__(self, history_size: int = 50):
        self._history: Deque[Notification] = deque(maxlen=history_size)
        self._listeners: List[Callable[[Notification], None]] = []

    def subscribe(self, listener: Callable[[Notification], None]) -> Callable[[], None]:
        """Register ``listener``; returns a function that removes it again."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def show(self, notification: Notification) -> None:
        if notification.is_error:
            logger.error(notification.message)
        else:
            logger.info(notification.message)

        self._history.append(notification)
        for listener in list(self._listeners):
            listener(notification)

    def success(self, title: str, description: str = "") -> None:
        self.show(Notification(title, description))

    def error(self, title: str, description: str = "") -> None:
        self.show(Notification(title, description, "destructive"))

    @property
    def history(self) -> List[Notification]:
        return list(self._history)

    @property
    def errors(self) -> List[Notification]:
        return [n for n in self._history if n.is_error]

    def clear(self) -> None:
        self._history.clear()
