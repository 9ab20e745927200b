"""Outcome and state models for the handoff protocol."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class HandoffState(str, Enum):
    """Lifecycle state of a generator's worker."""

    IDLE = "idle"
    SUSPENDED = "suspended"
    RUNNING = "running"
    FINISHED = "finished"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """True once no transition can leave this state."""
        return self in (HandoffState.FINISHED, HandoffState.FAILED)


@dataclass(frozen=True)
class Value(Generic[T]):
    """A value emitted by the producer."""

    value: T


@dataclass(frozen=True)
class Done:
    """The producer returned normally."""


@dataclass(frozen=True)
class Failure:
    """The producer raised; ``error`` is the original exception."""

    error: BaseException


DONE = Done()

Outcome = Union[Value[T], Done, Failure]
