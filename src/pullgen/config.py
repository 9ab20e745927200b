"""Configuration management for pull generators and the demo pipeline."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    Args:
        name: Variable name
        default: Value used when the variable is unset or empty

    Returns:
        Parsed boolean

    Raises:
        ValueError: If the value is not a recognised boolean
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class GeneratorConfig:
    """Worker thread settings shared by pull generators."""

    daemon: bool = True
    thread_name_prefix: str = "pullgen-worker"
    reject_none: bool = True

    @classmethod
    def default(cls) -> "GeneratorConfig":
        """Create default configuration without reading the environment."""
        return cls()

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Load generator configuration from environment variables.

        - PULLGEN_DAEMON_WORKERS: run workers as daemon threads (default true)
        - PULLGEN_THREAD_NAME_PREFIX: worker thread name prefix
        - PULLGEN_REJECT_NONE: reject ``None`` values in ``emit`` (default true)
        """
        return cls(
            daemon=_env_bool("PULLGEN_DAEMON_WORKERS", True),
            thread_name_prefix=os.getenv("PULLGEN_THREAD_NAME_PREFIX", "pullgen-worker"),
            reject_none=_env_bool("PULLGEN_REJECT_NONE", True),
        )


@dataclass
class AppConfig:
    """Demo application configuration parameters."""

    num_records: int
    batch_size: int
    output_dir: Path
    compression: str
    seed: int
    verbose: bool

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables."""
        return cls(
            num_records=int(os.getenv("NUM_RECORDS", "10000")),
            batch_size=int(os.getenv("BATCH_SIZE", "1000")),
            output_dir=Path(os.getenv("OUTPUT_DIR", "./output")),
            compression=os.getenv("COMPRESSION", "snappy"),
            seed=int(os.getenv("SEED", "42")),
            verbose=_env_bool("VERBOSE", False),
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.num_records < 0:
            raise ValueError("num_records must not be negative")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")


def get_generator_config() -> GeneratorConfig:
    """Get generator configuration."""
    return GeneratorConfig.from_env()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
