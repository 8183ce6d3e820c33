"""
Named Exception Core

- throwable: ThrowableError, the base error with ``throw`` and ``message``
- params: MessageParams, the read-only parameter store
- producers: static messages, message formatters and their registry
- named: NamedException, lazy name -> message resolution
- exceptional: ExceptionalException, raised when resolution itself fails
"""

from .exceptional import PREFIX, ExceptionalException
from .named import NamedException
from .params import MessageParams
from .producers import (
    MessageFormatter,
    MessageProducer,
    MessageRegistry,
    StaticMessage,
    as_producer,
    message_formatter,
    static_message,
)
from .throwable import ThrowableError

__all__ = [
    # Base
    "ThrowableError",
    # Named exceptions
    "NamedException",
    "ExceptionalException",
    "PREFIX",
    # Params
    "MessageParams",
    # Producers
    "MessageFormatter",
    "MessageProducer",
    "MessageRegistry",
    "StaticMessage",
    "as_producer",
    "message_formatter",
    "static_message",
]
