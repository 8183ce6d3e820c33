from __future__ import annotations

from named_exception.logging_config import get_logger

from .named import NamedException
from .producers import message_formatter, static_message

logger = get_logger(__name__)

PREFIX = "An exception was raised while handling an exception"


class ExceptionalException(NamedException):
    """Raised when a named exception cannot produce its message.

    ``previous_exception`` is the exception whose message failed. Every
    message starts with :data:`PREFIX`.
    """

    exceptional_exception = static_message(PREFIX)

    @message_formatter
    def unknown_exception_name(self):
        return "%s: %s has no message named '%s'" % (
            PREFIX,
            self.message_params.get("exception_class", "the exception"),
            self.message_params.get("exception_name"),
        )

    @message_formatter
    def undeclared_message(self):
        return "%s: '%s' on %s is not declared as a message" % (
            PREFIX,
            self.message_params.get("exception_name"),
            self.message_params.get("member_class", "the exception"),
        )

    @message_formatter
    def missing_message_param(self):
        return "%s: message '%s' requires parameter '%s'" % (
            PREFIX,
            self.message_params.get("exception_name"),
            self.message_params.get("param"),
        )

    @message_formatter
    def invalid_message_params(self):
        errors = self.message_params.get("errors") or []
        return "%s: invalid parameters for message '%s' (%s)" % (
            PREFIX,
            self.message_params.get("exception_name"),
            "; ".join(errors),
        )

    @message_formatter
    def message_formatter_failed(self):
        return "%s: message '%s' failed with %s" % (
            PREFIX,
            self.message_params.get("exception_name"),
            self.message_params.get("error"),
        )

    @message_formatter
    def missing_message(self):
        return "%s: %s was raised with neither a name nor a message" % (
            PREFIX,
            self.message_params.get("exception_class", "the exception"),
        )

    def _build_message(self) -> str:
        if not self.name:
            if self._explicit_message is None:
                return PREFIX
            return f"{PREFIX}: {self._explicit_message}"

        producer = self.find_message_producer(self.name)
        if producer is None:
            return f"{PREFIX}: unknown meta-error '{self.name}'"
        try:
            return producer.render(self)
        except Exception:
            # No further meta-error: that would never terminate
            logger.exception("Meta-error %r failed to render", self.name)
            return PREFIX


__all__ = ["ExceptionalException", "PREFIX"]
