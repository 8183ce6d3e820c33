"""
Named exceptions: errors raised by symbolic name instead of ad-hoc text.

Usage:
    from named_exception import NamedException, message_formatter, static_message

    class MyAppError(NamedException):
        file_not_found = static_message("I could not find the file you asked me to open")

        @message_formatter
        def empty_file(self):
            if not self.param_exists("path"):
                ExceptionalException.throw(name="exceptional_exception")
            return "Your file at '%s' is empty" % self.get_param("path")

    MyAppError.throw(name="file_not_found")
    MyAppError.throw(name="empty_file", message_params={"path": path})
    MyAppError.throw("Something happened...")  # no name: plain message

The message is resolved the first time it is read and cached afterwards.
A name that resolves to nothing, or a formatter that fails, surfaces as an
:class:`~named_exception.core.exceptional.ExceptionalException` at that read.
"""

from __future__ import annotations

import threading
from collections.abc import KeysView, Mapping
from typing import Any, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from named_exception.logging_config import get_logger

from .params import MessageParams
from .producers import (
    MessageFormatter,
    MessageProducer,
    MessageRegistry,
    StaticMessage,
    as_producer,
)
from .throwable import ThrowableError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_UNRESOLVED = object()


class NamedException(ThrowableError):
    """
    Error identified by ``name``, with ``message_params`` for its formatter.

    Subclasses declare their messages with ``static_message(...)`` and
    ``@message_formatter``; the declarations are registered when the class
    body is executed.
    """

    _messages = MessageRegistry()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        own = MessageRegistry()
        for attr, value in vars(cls).items():
            if isinstance(value, (StaticMessage, MessageFormatter)):
                own.register(attr, value)
        cls._messages = own

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        name: str = "",
        message_params: Optional[Mapping[str, Any]] = None,
        previous_exception: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, previous_exception=previous_exception)
        self._name = name or ""
        self._message_params = MessageParams(message_params)
        self._message_lock = threading.RLock()
        self._resolved_message: Any = _UNRESOLVED

    # -- registry -----------------------------------------------------------

    @classmethod
    def register_message(
        cls,
        name: str,
        producer: Union[str, Any],
    ) -> None:
        """Register a static message (str) or formatter (callable) under ``name``.

        Args:
            name: Exception name for lookup
            producer: Message text, or a callable taking the exception
        """
        cls._messages.register(name, as_producer(producer))

    @classmethod
    def _lookup_member(cls, name: str) -> tuple[MessageProducer | None, type | None]:
        """Find the class in the MRO that defines ``name``.

        Only NamedException and its subclasses own a ``_messages`` registry;
        other bases such as ``Exception`` can still define ``name`` as a plain
        member. Returns ``(producer, owner)``; ``producer`` is None when the
        owner's member is not a declared message, ``owner`` is None when no
        class defines ``name`` at all.
        """
        for klass in cls.__mro__:
            own = vars(klass).get("_messages")
            if own is not None and name in own:
                return own.get(name), klass
            if name in vars(klass):
                return None, klass
        return None, None

    @classmethod
    def find_message_producer(cls, name: str) -> MessageProducer | None:
        """Return the producer for ``name``, or None if it is not a declared message."""
        return cls._lookup_member(name)[0]

    @classmethod
    def message_registry(cls) -> MessageRegistry:
        """Merged registry of every name resolvable on this class."""
        merged = MessageRegistry()
        for klass in reversed(cls.__mro__):
            own = vars(klass).get("_messages")
            if own is not None:
                merged.update(own)
        resolvable = MessageRegistry()
        for name in merged:
            producer = cls.find_message_producer(name)
            if producer is not None:
                resolvable.register(name, producer)
        return resolvable

    # -- attributes ---------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def message_params(self) -> MessageParams:
        return self._message_params

    @property
    def message(self) -> str:
        """The resolved message; computed on first read, then cached.

        Raises:
            ExceptionalException: If the name cannot be turned into a message
        """
        if self._resolved_message is _UNRESOLVED:
            with self._message_lock:
                if self._resolved_message is _UNRESOLVED:
                    self._resolved_message = self._build_message()
        return self._resolved_message

    def _build_message(self) -> str:
        from .exceptional import ExceptionalException

        if not self._name:
            if self._explicit_message is None:
                raise self._meta_error(
                    "missing_message", exception_class=type(self).__qualname__
                )
            return self._explicit_message

        producer, owner = self._lookup_member(self._name)
        if producer is None:
            if owner is not None:
                raise self._meta_error(
                    "undeclared_message",
                    exception_class=type(self).__qualname__,
                    member_class=owner.__qualname__,
                )
            raise self._meta_error(
                "unknown_exception_name", exception_class=type(self).__qualname__
            )

        logger.debug(
            "Resolving message %r on %s", self._name, type(self).__qualname__
        )
        try:
            return producer.render(self)
        except ExceptionalException:
            raise
        except Exception as err:
            raise self._meta_error("message_formatter_failed", error=repr(err)) from err

    def _meta_error(self, meta_name: str, **params: Any):
        """Build the meta-error reporting that this exception could not be named."""
        from .exceptional import ExceptionalException

        logger.warning(
            "Named exception %r could not produce a message: %s",
            self._name,
            meta_name,
            extra={"exception_name": self._name, "meta_name": meta_name},
        )
        return ExceptionalException(
            name=meta_name,
            message_params={"exception_name": self._name, **params},
            previous_exception=self,
        )

    def __str__(self) -> str:
        from .exceptional import ExceptionalException

        try:
            return self.message
        except ExceptionalException as meta:
            return str(meta)

    def __repr__(self) -> str:
        if self._name:
            return (
                f"{type(self).__name__}(name={self._name!r}, "
                f"message_params={dict(self._message_params)!r})"
            )
        return f"{type(self).__name__}({self._explicit_message!r})"

    # -- message params -----------------------------------------------------

    def get_param(self, *keys: str, last: bool = False) -> Any:
        """Return the value (or values) from ``message_params`` for ``keys``.

        One key returns its value; several keys return a tuple in request
        order; ``last=True`` returns the value of the last key requested.

        Raises:
            TypeError: If no key is given
            ExceptionalException: ``missing_message_param`` if a key is absent
        """
        try:
            return self._message_params.get_param(*keys, last=last)
        except KeyError as err:
            raise self._meta_error("missing_message_param", param=err.args[0]) from err

    def all_params(self) -> List[Tuple[str, Any]]:
        return self._message_params.all_params()

    def param_keys(self) -> KeysView:
        return self._message_params.param_keys()

    def param_values(self) -> List[Any]:
        return self._message_params.param_values()

    def param_exists(self, key: str) -> bool:
        return self._message_params.param_exists(key)

    def param_is_defined(self, key: str) -> bool:
        return self._message_params.param_is_defined(key)

    def params_is_empty(self) -> bool:
        return self._message_params.params_is_empty()

    def validate_params(self, model: Type[ModelT]) -> ModelT:
        """Validate ``message_params`` against a pydantic model.

        Raises:
            ExceptionalException: ``invalid_message_params`` on a validation error
        """
        try:
            return self._message_params.validate(model)
        except ValidationError as err:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in err.errors()
            ]
            raise self._meta_error("invalid_message_params", errors=errors) from err


__all__ = ["NamedException"]
