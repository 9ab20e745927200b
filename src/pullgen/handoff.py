"""
Handoff core: a single-slot rendezvous between a consumer and a worker thread.

The worker runs the producer. Each ``resume()`` from the consumer lets the
worker run until it emits a value, returns or raises, and blocks the consumer
until then. Exactly one of the two parties is runnable at any time.

A producer that never returns keeps its worker parked inside ``emit`` once
the consumer stops pulling. There is no cancellation, so that thread is never
reclaimed. Workers are daemon threads by default so they do not keep the
interpreter alive.
"""

import itertools
import logging
import threading
from typing import Generic, Optional

from .config import GeneratorConfig
from .errors import NullValueRejected, WrongCallerError
from .models import DONE, Failure, HandoffState, Outcome, T, Value
from .protocols import LoggerProtocol, Producer

_worker_ids = itertools.count(1)


class _Rendezvous:
    """
    Condition-guarded cell owning the handoff state and the one-value slot.

    The caller writes RUNNING and waits for anything else; the worker writes
    SUSPENDED, FINISHED or FAILED and waits for RUNNING.
    """

    def __init__(self):
        self._condition = threading.Condition()
        self._state = HandoffState.IDLE
        self._slot: Optional[Outcome] = None

    @property
    def state(self) -> HandoffState:
        with self._condition:
            return self._state

    def _is_running(self) -> bool:
        return self._state is HandoffState.RUNNING

    def await_resume(self) -> None:
        """Park the worker until the first resume."""
        with self._condition:
            self._condition.wait_for(self._is_running)

    def suspend_with(self, outcome: Value) -> None:
        """Store a value, wake the caller, then park until resumed again."""
        with self._condition:
            self._slot = outcome
            self._state = HandoffState.SUSPENDED
            self._condition.notify_all()
            self._condition.wait_for(self._is_running)

    def finish_with(self, outcome: Outcome, state: HandoffState) -> None:
        """Store a terminal outcome and wake the caller."""
        with self._condition:
            self._slot = outcome
            self._state = state
            self._condition.notify_all()

    def resume(self) -> Outcome:
        """Hand control to the worker and take the outcome it reports."""
        with self._condition:
            if self._state.is_terminal:
                return self._slot
            self._state = HandoffState.RUNNING
            self._condition.notify_all()
            self._condition.wait_for(lambda: not self._is_running())
            outcome = self._slot
            if self._state is HandoffState.SUSPENDED:
                self._slot = None
            return outcome


class HandoffCore(Generic[T]):
    """
    Runs a producer on a dedicated worker thread, one step per resume.

    Single Responsibility: Own the worker lifecycle and the caller/worker handoff.
    """

    def __init__(
        self,
        producer: Producer,
        config: Optional[GeneratorConfig] = None,
        name: Optional[str] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize the core and start its worker, parked until the first resume.

        Args:
            producer: Callable receiving ``emit`` as its only argument
            config: Worker settings (defaults to GeneratorConfig.default())
            name: Worker thread name
            logger: Logger instance (defaults to module logger)
        """
        self._producer = producer
        self._config = config or GeneratorConfig.default()
        self.name = name or f"{self._config.thread_name_prefix}-{next(_worker_ids)}"
        self._logger = logger or logging.getLogger(__name__)
        self._cell = _Rendezvous()
        self._caller: Optional[threading.Thread] = None
        self._worker = threading.Thread(
            target=self._run, name=self.name, daemon=self._config.daemon
        )
        self._worker.start()

    @property
    def state(self) -> HandoffState:
        """Current state of the worker."""
        return self._cell.state

    @property
    def caller(self) -> Optional[threading.Thread]:
        """Thread that issued the most recent resume, if any."""
        return self._caller

    @property
    def worker(self) -> threading.Thread:
        """Thread running the producer."""
        return self._worker

    def resume(self) -> Outcome[T]:
        """
        Run the producer up to its next emit, return or raise.

        Must not be called concurrently for the same core. Once the producer
        has finished or failed, the same terminal outcome is returned on every
        call without touching the worker.

        Returns:
            Value, Done or Failure

        Raises:
            WrongCallerError: If called from this core's own worker
        """
        current = threading.current_thread()
        if current is self._worker:
            raise WrongCallerError(f"{self.name} cannot resume itself from its own worker")

        self._caller = current
        if self._logger:
            self._logger.debug(f"{self.name} resumed by {current.name}")
        return self._cell.resume()

    def emit(self, value: T) -> None:
        """
        Hand a value to the waiting caller and suspend until resumed.

        Args:
            value: Value to hand over

        Raises:
            WrongCallerError: If called from any thread other than the worker
            NullValueRejected: If value is None and reject_none is enabled
        """
        current = threading.current_thread()
        if current is not self._worker:
            raise WrongCallerError(
                f"Values can be emitted only from worker {self.name}, not from {current.name}"
            )
        if value is None and self._config.reject_none:
            raise NullValueRejected(f"{self.name} cannot emit None values")

        self._cell.suspend_with(Value(value))

    def _run(self) -> None:
        """Worker body: wait for the first resume, run the producer once."""
        self._cell.await_resume()
        if self._logger:
            self._logger.debug(f"{self.name} starting producer")

        try:
            self._producer(self.emit)
        except BaseException as error:
            if self._logger:
                self._logger.debug(f"{self.name} producer failed: {error!r}")
            self._cell.finish_with(Failure(error), HandoffState.FAILED)
        else:
            if self._logger:
                self._logger.debug(f"{self.name} producer finished")
            self._cell.finish_with(DONE, HandoffState.FINISHED)

    def __repr__(self) -> str:
        return f"HandoffCore(name={self.name!r}, state={self.state.value})"
