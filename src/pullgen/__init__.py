"""pullgen - Lazy pull-based generators backed by a dedicated worker thread."""

__version__ = "0.1.0"

from .config import GeneratorConfig
from .errors import (
    ExhaustedError,
    NullValueRejected,
    ProducerFailure,
    PullGeneratorError,
    WrongCallerError,
)
from .generator import PullGenerator, producer
from .handoff import HandoffCore
from .iterator import PullIterator
from .models import DONE, Done, Failure, HandoffState, Value

__all__ = [
    # Generator
    "PullGenerator",
    "PullIterator",
    "HandoffCore",
    "producer",
    # Models
    "HandoffState",
    "Value",
    "Done",
    "Failure",
    "DONE",
    # Config
    "GeneratorConfig",
    # Errors
    "PullGeneratorError",
    "WrongCallerError",
    "NullValueRejected",
    "ProducerFailure",
    "ExhaustedError",
]
