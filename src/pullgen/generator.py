"""Public generator type built on the handoff core."""

import functools
from typing import Any, Callable, Generic, Optional

from .config import GeneratorConfig
from .handoff import HandoffCore
from .iterator import PullIterator
from .models import HandoffState, T
from .protocols import Emit, LoggerProtocol, Producer


class PullGenerator(Generic[T]):
    """
    Lazy sequence whose values are produced on demand by a worker thread.

    The producer receives an ``emit`` callable and is not run until the first
    value is requested. The generator exposes one iterator for its whole
    lifetime, so iteration cannot be restarted:

        >>> gen = PullGenerator(lambda emit: [emit(i) for i in range(3)])
        >>> list(gen)
        [0, 1, 2]
        >>> list(gen)
        []
    """

    def __init__(
        self,
        producer: Producer,
        *,
        config: Optional[GeneratorConfig] = None,
        name: Optional[str] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize generator.

        Args:
            producer: Callable receiving ``emit``; runs to completion or raises
            config: Worker settings
            name: Worker thread name
            logger: Logger instance
        """
        self._core: HandoffCore[T] = HandoffCore(producer, config, name, logger)
        self._iterator: PullIterator[T] = PullIterator(self._core)

    @property
    def name(self) -> str:
        """Worker thread name."""
        return self._core.name

    @property
    def state(self) -> HandoffState:
        """Current worker state."""
        return self._core.state

    def iterator(self) -> PullIterator[T]:
        """Return the generator's single iterator."""
        return self._iterator

    def __iter__(self) -> PullIterator[T]:
        return self._iterator

    def __repr__(self) -> str:
        return f"PullGenerator(name={self.name!r}, state={self.state.value})"


def producer(
    func: Optional[Callable[..., Any]] = None,
    *,
    config: Optional[GeneratorConfig] = None,
) -> Any:
    """
    Turn a producer function into a PullGenerator factory.

    The decorated function takes ``emit`` first; the remaining arguments are
    supplied by the caller of the factory:

        @producer
        def first_n(emit, n):
            for i in range(1, n + 1):
                emit(i)

        list(first_n(3))  # [1, 2, 3]

    Args:
        func: Producer function taking (emit, *args, **kwargs)
        config: Worker settings for every generator built by the factory

    Returns:
        Factory returning a new PullGenerator per call
    """

    def decorate(body: Callable[..., Any]) -> Callable[..., PullGenerator]:
        @functools.wraps(body)
        def factory(*args: Any, **kwargs: Any) -> PullGenerator:
            def run(emit: Emit) -> None:
                body(emit, *args, **kwargs)

            return PullGenerator(run, config=config)

        return factory

    if func is None:
        return decorate
    return decorate(func)
