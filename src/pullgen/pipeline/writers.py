"""Parquet sink for frames built from pulled records."""

import logging
import time
from pathlib import Path
from typing import Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from ..models import HandoffState
from ..protocols import LoggerProtocol
from .models import WriteStatistics


class ParquetWriter:
    """
    Appends DataFrames to a single Parquet file, one row group per frame.

    The file and its schema are created from the first frame, so a producer
    that emits nothing leaves no file behind.
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "snappy",
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize Parquet writer.

        Args:
            output_path: Path to output Parquet file
            compression: Compression codec
            logger: Logger instance
        """
        self.output_path = Path(output_path)
        self.compression = compression
        self._logger = logger or logging.getLogger(__name__)
        self._writer: Optional[pq.ParquetWriter] = None
        self._stats = WriteStatistics()
        self._started = time.time()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def write_frame(self, df: pd.DataFrame) -> None:
        """
        Append one frame as a row group.

        Args:
            df: Frame to append; must match the schema of the first frame
        """
        table = pa.Table.from_pandas(df, preserve_index=False)
        if self._writer is None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self._writer = pq.ParquetWriter(
                str(self.output_path), table.schema, compression=self.compression
            )

        self._writer.write_table(table)
        self._stats.total_rows += table.num_rows
        self._stats.total_batches += 1

    def finish(
        self,
        records_pulled: int = 0,
        producer_state: Optional[HandoffState] = None,
    ) -> WriteStatistics:
        """
        Close the file and report what was written.

        Args:
            records_pulled: Records taken from the generator
            producer_state: Final state of the generator that fed the frames

        Returns:
            WriteStatistics for this file
        """
        self.close()

        stats = self._stats
        stats.records_pulled = records_pulled
        stats.producer_state = producer_state
        stats.file_size_bytes = (
            self.output_path.stat().st_size if self.output_path.exists() else 0
        )
        stats.elapsed_time = time.time() - self._started

        if self._logger:
            self._logger.info(
                f"Wrote {stats.total_rows} rows in {stats.total_batches} row groups "
                f"to {self.output_path}"
            )
        return stats

    def close(self):
        """Close the underlying Parquet writer, if one was opened."""
        if self._writer:
            self._writer.close()
            self._writer = None
