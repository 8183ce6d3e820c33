"""
Named Exception

Raise errors by symbolic name. Each name maps to a static message or to a
formatter that builds the message from ``message_params``:

    class MyAppError(NamedException):
        static_error = static_message("Something happened")

        @message_formatter
        def customized_error(self):
            return "Something happened to %s" % self.get_param("foo")

    MyAppError.throw(name="customized_error", message_params={"foo": "bar"})

Failures of the naming mechanism itself are raised as ExceptionalException.
"""

__version__ = "0.1.0"

from .config import Config
from .core import (
    PREFIX,
    ExceptionalException,
    MessageFormatter,
    MessageParams,
    MessageRegistry,
    NamedException,
    StaticMessage,
    ThrowableError,
    message_formatter,
    static_message,
)
from .logging_config import JSONFormatter, get_logger

__all__ = [
    # Errors
    "ThrowableError",
    "NamedException",
    "ExceptionalException",
    "PREFIX",
    # Declarations
    "static_message",
    "message_formatter",
    "StaticMessage",
    "MessageFormatter",
    "MessageRegistry",
    "MessageParams",
    # Config / logging
    "Config",
    "JSONFormatter",
    "get_logger",
]
