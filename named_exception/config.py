"""
Configuration Management

Settings read from environment variables with sensible defaults.
"""

import os


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Package configuration."""

    # Capture a stack trace when a ThrowableError is constructed
    CAPTURE_STACK_TRACE = _env_flag("NAMED_EXCEPTION_CAPTURE_STACK_TRACE", "true")

    @classmethod
    def reload(cls) -> None:
        """Re-read settings from the environment."""
        cls.CAPTURE_STACK_TRACE = _env_flag("NAMED_EXCEPTION_CAPTURE_STACK_TRACE", "true")
