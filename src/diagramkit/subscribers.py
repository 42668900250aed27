"""
Notification bus - Subscribers observing diagram state changes.

Diagrams and figures keep an ordered list of subscribers and broadcast a message
to all of them after every state-changing operation. Subscribers are only ever
attached, there is no way to detach one.
"""

from typing import Callable, List, Protocol
import click
import logging

log = logging.getLogger(__name__)

#: Anything that accepts a line of text, ``click.echo`` by default.
Emit = Callable[[str], None]


class Subscriber(Protocol):
    """Protocol for diagram observers."""

    def notify(self, message: str) -> None:
        """
        Receive notification about diagram state change.

        :param message: Human readable description of the change
        """
        ...


class RegularSubscriber:
    """Writes every notification prefixed as regular subscriber."""

    prefix = "[Regular Subscriber]"

    def __init__(self, emit: Emit | None = None):
        self.emit = emit or click.echo

    def notify(self, message: str) -> None:
        self.emit(f"{self.prefix} {message}")


class ContrastImageSubscriber(RegularSubscriber):
    """Writes every notification prefixed as contrast image subscriber."""

    prefix = "[Contrast Image Subscriber]"


class RecordingSubscriber:
    """Keeps received notifications in memory."""

    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class Subject:
    """Mixin for objects owning an ordered list of subscribers."""

    def __init__(self):
        self.subscribers: List[Subscriber] = []

    def attach_subscriber(self, subscriber: Subscriber) -> None:
        self.subscribers.append(subscriber)

    def notify_subscribers(self, message: str) -> None:
        """
        Broadcast message to all subscribers, in order they were attached.

        :param message: Notification text
        """
        log.debug(f"Notifying {len(self.subscribers)} subscriber(s): {message}")
        for subscriber in self.subscribers:
            subscriber.notify(message)
