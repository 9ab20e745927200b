"""Demo pipeline streaming pulled records into Parquet."""

from .models import PipelineConfig, WriteStatistics
from .pipeline import RecordPipeline
from .processors import DataFrameTransformer, RecordBatcher
from .producers import FakeRecordProducer
from .writers import ParquetWriter

__all__ = [
    # Models
    "PipelineConfig",
    "WriteStatistics",
    # Producers
    "FakeRecordProducer",
    # Processors
    "RecordBatcher",
    "DataFrameTransformer",
    # Writers
    "ParquetWriter",
    # Pipeline
    "RecordPipeline",
]
