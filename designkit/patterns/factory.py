"""Factory pattern.

Callers ask for "a notification of kind X" without naming a concrete class.
The naive factory matches strings in an ``if`` chain and only notices a
missing kind at runtime; the registry version maps every member of a
``NotificationKind`` enum to a constructor, so the set of kinds and the set
of constructors can be checked against each other.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from designkit.config import settings
from designkit.registry import FactoryRegistry

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


@dataclass
class Delivery:
    """What a notification produced."""
    channel: str
    recipient: str
    body: str


class Notification(ABC):
    kind: NotificationKind

    @abstractmethod
    def send(self, recipient: str, message: str) -> Delivery:
        ...


notifications: FactoryRegistry[Notification] = FactoryRegistry("notification")


@notifications.register(NotificationKind.EMAIL)
class EmailNotification(Notification):
    kind = NotificationKind.EMAIL

    def send(self, recipient: str, message: str) -> Delivery:
        print(f"Sending email to {recipient}: {message}")
        return Delivery(self.kind.value, recipient, message)


@notifications.register(NotificationKind.SMS)
class SmsNotification(Notification):
    kind = NotificationKind.SMS

    def send(self, recipient: str, message: str) -> Delivery:
        print(f"Sending SMS to {recipient}: {message}")
        return Delivery(self.kind.value, recipient, message)


@notifications.register(NotificationKind.PUSH)
class PushNotification(Notification):
    kind = NotificationKind.PUSH

    def __init__(self, app_name: str = "designkit"):
        self.app_name = app_name

    def send(self, recipient: str, message: str) -> Delivery:
        body = f"[{self.app_name}] {message}"
        print(f"Pushing to {recipient}: {body}")
        return Delivery(self.kind.value, recipient, body)


def create_notification(kind: str) -> Notification:
    """String-switch factory; new kinds mean editing this function."""
    if kind == "email":
        return EmailNotification()
    elif kind == "sms":
        return SmsNotification()
    else:
        raise ValueError(f"Unknown notification type: {kind}")


def notification_for(kind: NotificationKind | str | None = None, **kwargs) -> Notification:
    """Build a notification from the registry; defaults to the configured kind."""
    if kind is None:
        kind = settings.default_notification
    notification = notifications.create(kind, **kwargs)
    logger.debug("Created %s notification", notification.kind.value)
    return notification


def demo() -> None:
    print("-- before: string switch")
    create_notification("email").send("grace@example.com", "Welcome!")
    try:
        create_notification("push")
    except ValueError as e:
        print(f"create_notification failed: {e}")

    print("-- after: every NotificationKind has a registered constructor")
    for kind in NotificationKind:
        notification_for(kind).send("grace", f"hello over {kind.value}")
