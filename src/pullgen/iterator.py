"""Iterator adapter over the handoff core."""

from typing import Iterator, Optional

from .errors import ExhaustedError, ProducerFailure
from .handoff import HandoffCore
from .models import Failure, T, Value


class PullIterator(Iterator[T]):
    """
    Standard iterator that pulls one value at a time from a HandoffCore.

    Single Responsibility: Cache at most one pulled value between has_next and next.
    """

    def __init__(self, core: HandoffCore[T]):
        """
        Initialize iterator.

        Args:
            core: Handoff core to resume
        """
        self._core = core
        self._pending: Optional[Value[T]] = None
        self._ended = False

    def __iter__(self) -> "PullIterator[T]":
        return self

    def has_next(self) -> bool:
        """
        Check whether another value is available, pulling it if needed.

        A pulled value is cached so repeated calls do not advance the producer.

        Returns:
            True if next() will return a value

        Raises:
            ProducerFailure: If the producer raised while being resumed
        """
        while self._pending is None and not self._ended:
            outcome = self._core.resume()
            if isinstance(outcome, Value):
                self._pending = outcome
            elif isinstance(outcome, Failure):
                raise ProducerFailure(outcome.error, self._core.name) from outcome.error
            else:
                self._ended = True

        return self._pending is not None

    def __next__(self) -> T:
        """
        Return the next value.

        Raises:
            ExhaustedError: If the producer has finished
            ProducerFailure: If the producer raised while being resumed
        """
        if not self.has_next():
            raise ExhaustedError()

        pending, self._pending = self._pending, None
        return pending.value

    next = __next__
