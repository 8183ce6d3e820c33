"""
Message producers and the per-class registry that maps names to them.

A producer is either a static message (fixed text) or a message formatter
(a function of the exception instance). Producers are declared in a class
body and collected into a :class:`MessageRegistry` when the class is created:

    class MyAppError(NamedException):
        file_not_found = static_message("I could not find the file")

        @message_formatter
        def empty_file(self):
            return "Your file at '%s' is empty" % self.get_param("path")

Both declarations stay usable as attributes: ``err.file_not_found`` is the
text, ``err.empty_file()`` calls the formatter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Union


@dataclass(frozen=True)
class StaticMessage:
    """Producer returning fixed text."""

    text: str

    def render(self, exception: Any) -> str:
        return self.text

    def __get__(self, instance: Any, owner: Optional[type] = None):
        if instance is None:
            return self
        return self.text

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError("static messages are read-only")


@dataclass(frozen=True)
class MessageFormatter:
    """Producer computing the message from the exception instance."""

    func: Callable[[Any], Any]

    def render(self, exception: Any) -> str:
        return str(self.func(exception))

    def __get__(self, instance: Any, owner: Optional[type] = None):
        if instance is None:
            return self
        return self.func.__get__(instance, owner)


MessageProducer = Union[StaticMessage, MessageFormatter]


def static_message(text: str) -> StaticMessage:
    """Declare a static message in a class body."""
    if not isinstance(text, str):
        raise TypeError(f"static message must be a str, got {type(text).__name__}")
    return StaticMessage(text)


def message_formatter(func: Callable[[Any], Any]) -> MessageFormatter:
    """Decorator declaring a message formatter method."""
    return MessageFormatter(func)


def as_producer(value: Union[str, Callable[[Any], Any], MessageProducer]) -> MessageProducer:
    """Coerce a str or callable into a producer."""
    if isinstance(value, (StaticMessage, MessageFormatter)):
        return value
    if isinstance(value, str):
        return StaticMessage(value)
    if callable(value):
        return MessageFormatter(value)
    raise TypeError(
        f"message producer must be a str or callable, got {type(value).__name__}"
    )


class MessageRegistry:
    """
    Name -> producer mapping for one exception class.

    Each exception class owns the names declared in its body. Lookups walk
    the class MRO, so a parent's names resolve on subclasses unless overridden.
    """

    def __init__(self, producers: Optional[Dict[str, MessageProducer]] = None):
        self._producers: Dict[str, MessageProducer] = dict(producers or {})

    def register(self, name: str, producer: MessageProducer) -> None:
        """Register ``producer`` under ``name``, replacing any previous one.

        Args:
            name: Exception name for lookup
            producer: StaticMessage or MessageFormatter
        """
        if not name:
            raise ValueError("message name must be a non-empty string")
        self._producers[name] = producer

    def get(self, name: str) -> MessageProducer | None:
        return self._producers.get(name)

    def names(self) -> list[str]:
        """List registered names, sorted."""
        return sorted(self._producers)

    def update(self, other: "MessageRegistry") -> None:
        """Copy every producer of ``other`` into this registry."""
        self._producers.update(other._producers)

    def __contains__(self, name: object) -> bool:
        return name in self._producers

    def __iter__(self) -> Iterator[str]:
        return iter(self._producers)

    def __len__(self) -> int:
        return len(self._producers)


__all__ = [
    "MessageFormatter",
    "MessageProducer",
    "MessageRegistry",
    "StaticMessage",
    "as_producer",
    "message_formatter",
    "static_message",
]
