from __future__ import annotations

import sys
import traceback
from typing import Any, Optional

from named_exception.config import Config


class ThrowableError(Exception):
    """Base error carrying a message, the error being handled and a stack trace.

    Parameters
    ----------
    message:
        Human readable error message.
    previous_exception:
        The exception that was being handled when this one was created.
        Defaults to the one currently in flight, if any.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        previous_exception: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self._explicit_message = message
        if previous_exception is None:
            previous_exception = sys.exc_info()[1]
        self.previous_exception = previous_exception
        self.stack_trace: Optional[traceback.StackSummary] = None
        if Config.CAPTURE_STACK_TRACE:
            # Frames from this module are construction noise
            self.stack_trace = traceback.StackSummary.from_list(
                [f for f in traceback.extract_stack() if f.filename != __file__]
            )

    @property
    def message(self) -> Optional[str]:
        return self._explicit_message

    @classmethod
    def throw(cls, *args: Any, **attributes: Any):
        """Construct an instance and raise it."""
        raise cls(*args, **attributes)

    def __str__(self) -> str:
        message = self.message
        return "" if message is None else message


__all__ = ["ThrowableError"]
