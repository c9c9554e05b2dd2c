"""A minimal in-process topic broker."""

from __future__ import annotations

from typing import Callable

Callback = Callable[[str], None]


class Broker:
    """Routes messages published on a topic to every callback subscribed to it."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Callback]] = {}

    def subscribe(self, topic: str, callback: Callback) -> None:
        """Register ``callback`` to be called with each message on ``topic``."""
        self._subscribers.setdefault(topic, []).append(callback)

    def publish(self, topic: str, message: str) -> None:
        """Deliver ``message`` to the subscribers of ``topic`` in subscription order."""
        for callback in self._subscribers.get(topic, ()):
            callback(message)