"""Exception types raised by pull generators."""

from typing import Optional


class PullGeneratorError(Exception):
    """Base class for pull generator errors."""


class WrongCallerError(PullGeneratorError, RuntimeError):
    """
    Raised when the handoff is driven from the wrong thread.

    Either ``emit`` was called from a thread other than the generator's
    worker, or the worker tried to resume its own generator.
    """


class NullValueRejected(PullGeneratorError, ValueError):
    """Raised when a producer emits ``None`` while ``reject_none`` is enabled."""


class ProducerFailure(PullGeneratorError, RuntimeError):
    """
    Wraps an exception that escaped the producer.

    The original exception is available as ``cause`` and is also chained
    as ``__cause__`` when raised with ``raise ... from``.
    """

    def __init__(self, cause: BaseException, generator_name: Optional[str] = None):
        """
        Initialize failure.

        Args:
            cause: Exception raised by the producer
            generator_name: Name of the generator that failed
        """
        self.cause = cause
        self.generator_name = generator_name
        where = f" in {generator_name}" if generator_name else ""
        super().__init__(f"Producer failed{where}: {type(cause).__name__}: {cause}")


class ExhaustedError(StopIteration):
    """Raised by ``next()`` when the generator has no more values."""
