"""Configuration error raised when merged engine settings fail validation."""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Engine configuration is invalid and the engine cannot be built."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.recoverable = False
