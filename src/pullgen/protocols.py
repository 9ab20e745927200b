"""Protocol definitions for dependency inversion."""

from typing import Any, Callable, Protocol

from .models import T

Emit = Callable[[T], None]
Producer = Callable[[Emit], Any]


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
