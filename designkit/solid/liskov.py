"""Liskov Substitution Principle.

Anything that accepts a base type must keep working when handed a subtype.
An override that raises ``NotImplementedError`` breaks that promise; the fix
is to give each capability its own interface and only implement what a
class can actually do.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from designkit.solid.models import Customer

SMS_MAX_LENGTH = 160


# --- Before -----------------------------------------------------------------

class DisplayableBook:
    def __init__(self, title: str):
        self.title = title

    def display_content(self) -> str:
        message = f"Displaying {self.title} content..."
        print(message)
        return message


class NarratedBook(DisplayableBook):
    """Claims to be a DisplayableBook but cannot display anything."""

    def display_content(self) -> str:
        raise NotImplementedError("AudioBook cannot display content as text.")


def show_all(books: list[DisplayableBook]) -> list[str]:
    """Blows up as soon as it meets a NarratedBook."""
    return [book.display_content() for book in books]


# --- After ------------------------------------------------------------------

class ReadableBook(ABC):
    @abstractmethod
    def display_content(self) -> str:
        ...


class AudioPlayable(ABC):
    @abstractmethod
    def play_audio(self) -> str:
        ...


class TextBook(ReadableBook):
    def __init__(self, title: str):
        self.title = title

    def display_content(self) -> str:
        message = f"Displaying {self.title} content..."
        print(message)
        return message


class AudioBook(AudioPlayable):
    def __init__(self, title: str):
        self.title = title

    def play_audio(self) -> str:
        message = f"Playing audiobook {self.title}..."
        print(message)
        return message


class IllustratedAudioBook(ReadableBook, AudioPlayable):
    """Implements both capabilities because it genuinely has both."""

    def __init__(self, title: str):
        self.title = title

    def display_content(self) -> str:
        message = f"Displaying {self.title} illustrations..."
        print(message)
        return message

    def play_audio(self) -> str:
        message = f"Playing {self.title} narration..."
        print(message)
        return message


class BaseNotification(ABC):
    """A channel that can deliver a message to a customer."""

    @abstractmethod
    def send(self, customer: Customer, message: str) -> str:
        """Deliver ``message`` and return the text that was sent."""


class EmailNotification(BaseNotification):
    def send(self, customer: Customer, message: str) -> str:
        sent = f"Email to {customer.email or customer.name}: {message}"
        print(sent)
        return sent


class SmsNotification(BaseNotification):
    def send(self, customer: Customer, message: str) -> str:
        # Long messages are truncated, never rejected.
        if len(message) > SMS_MAX_LENGTH:
            message = message[: SMS_MAX_LENGTH - 3] + "..."
        sent = f"SMS to {customer.phone or customer.name}: {message}"
        print(sent)
        return sent


class NotificationService:
    def notify(self, notification: BaseNotification, customer: Customer, message: str) -> str:
        return notification.send(customer, message)


def demo() -> None:
    print("-- before: a subclass that refuses its parent's job")
    try:
        show_all([DisplayableBook("Emma"), NarratedBook("Persuasion")])
    except NotImplementedError as e:
        print(f"show_all failed: {e}")

    print("-- after: capabilities split, every implementation keeps its word")
    readable: list[ReadableBook] = [TextBook("Emma"), IllustratedAudioBook("The Hobbit")]
    playable: list[AudioPlayable] = [AudioBook("Persuasion"), IllustratedAudioBook("The Hobbit")]
    for book in readable:
        book.display_content()
    for book in playable:
        book.play_audio()

    print("-- notifications are interchangeable")
    customer = Customer("Carol", email="carol@example.com", phone="+15550100")
    service = NotificationService()
    for channel in (EmailNotification(), SmsNotification()):
        service.notify(channel, customer, "Your order has shipped.")
