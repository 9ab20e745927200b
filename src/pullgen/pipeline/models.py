"""Data models and configuration classes for the demo pipeline."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..models import HandoffState


@dataclass
class PipelineConfig:
    """Pipeline configuration."""

    num_records: int = 10000
    batch_size: int = 1000
    seed: int = 42
    compression: str = "snappy"
    output_file: Path = field(default_factory=lambda: Path("records.parquet"))

    @classmethod
    def default(cls) -> "PipelineConfig":
        """Create default configuration."""
        return cls()

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.num_records < 0:
            raise ValueError("num_records must not be negative")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.output_file = Path(self.output_file)


@dataclass
class WriteStatistics:
    """Statistics for write operations."""

    total_rows: int = 0
    total_batches: int = 0
    file_size_bytes: int = 0
    elapsed_time: float = 0.0
    records_pulled: int = 0
    producer_state: Optional[HandoffState] = None
