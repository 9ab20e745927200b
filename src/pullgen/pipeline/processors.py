"""Stages that pull records from a generator and shape them into frames."""

import logging
from typing import Any, Dict, Iterator, List, Sequence

import pandas as pd

from ..iterator import PullIterator
from .producers import RECORD_COLUMNS

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RecordBatcher:
    """
    Pulls records from a PullIterator, at most ``batch_size`` at a time.

    A full batch is returned without asking for the next record, so the
    producer stays parked on the last value it emitted.
    """

    def __init__(self, batch_size: int = 1000):
        """
        Initialize batcher.

        Args:
            batch_size: Maximum number of records per batch
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size
        self.pulled = 0

    def take(self, records: PullIterator[Record]) -> List[Record]:
        """
        Pull the next batch.

        Args:
            records: Iterator of a record generator

        Returns:
            Up to batch_size records; empty once the producer has finished
        """
        batch: List[Record] = []
        while len(batch) < self.batch_size and records.has_next():
            batch.append(next(records))

        self.pulled += len(batch)
        return batch

    def batches(self, records: PullIterator[Record]) -> Iterator[List[Record]]:
        """Yield batches until the producer finishes."""
        batch = self.take(records)
        while batch:
            yield batch
            batch = self.take(records)


class DataFrameTransformer:
    """
    Builds DataFrames with a fixed column layout from record batches.

    Frames are numbered in the order they are built.
    """

    def __init__(self, columns: Sequence[str] = RECORD_COLUMNS):
        """
        Initialize transformer.

        Args:
            columns: Column order of every frame; missing fields become nulls
        """
        self.columns = list(columns)
        self.frames_built = 0

    def to_frame(self, batch: List[Record]) -> pd.DataFrame:
        """
        Convert one batch to a DataFrame tagged with its batch number.

        Args:
            batch: Records pulled by RecordBatcher

        Returns:
            DataFrame with ``columns`` plus ``batch_number``
        """
        self.frames_built += 1
        df = pd.DataFrame.from_records(batch, columns=self.columns)

        if "date_of_birth" in df.columns:
            df["date_of_birth"] = pd.to_datetime(df["date_of_birth"])
        df["batch_number"] = self.frames_built

        logger.debug(f"Built frame {self.frames_built} from {len(batch)} records")
        return df
