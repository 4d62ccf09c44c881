"""Transient user-visible notifications."""

from dataclasses import dataclass
from typing import Literal, Protocol

from rich.console import Console

Variant = Literal["default", "destructive"]


@dataclass
class Notification:
    title: str
    description: str | None = None
    variant: Variant = "default"


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class MemoryNotifier:
    """Keeps notifications in a list. Used by tests and non-interactive callers."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None


class ConsoleNotifier:
    """Prints notifications with Rich."""

    def __init__(self, console: Console):
        self.console = console

    def notify(self, notification: Notification) -> None:
        style = "red" if notification.variant == "destructive" else "green"
        line = f"[bold {style}]{notification.title}[/bold {style}]"
        if notification.description:
            line += f" {notification.description}"
        self.console.print(line)


def error_notification(error: Exception) -> Notification:
    return Notification(title="Error", description=str(error), variant="destructive")
