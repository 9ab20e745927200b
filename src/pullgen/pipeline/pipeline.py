"""Pipeline orchestrator for the demo."""

import logging
import time
from typing import Optional

from ..config import GeneratorConfig
from ..generator import PullGenerator
from ..protocols import LoggerProtocol
from .models import PipelineConfig, WriteStatistics
from .processors import DataFrameTransformer, RecordBatcher
from .producers import FakeRecordProducer
from .writers import ParquetWriter


class RecordPipeline:
    """
    Streams records from a callback-style producer into a Parquet file.

    The producer pushes records into ``emit``; a PullGenerator turns it into
    an iterator, so each batch is only produced when the writer asks for it.
    """

    def __init__(
        self,
        config: PipelineConfig,
        generator_config: Optional[GeneratorConfig] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize pipeline.

        Args:
            config: Pipeline configuration
            generator_config: Worker settings for the record generator
            logger: Logger instance
        """
        self.config = config
        self.generator_config = generator_config
        self._logger = logger or logging.getLogger(__name__)

        self.producer = FakeRecordProducer(config.num_records, seed=config.seed)
        self.batcher = RecordBatcher(config.batch_size)
        self.transformer = DataFrameTransformer()

    def execute(self) -> WriteStatistics:
        """
        Execute the complete pipeline.

        Returns:
            WriteStatistics with operation results

        Raises:
            ProducerFailure: If the record producer raised
        """
        if self._logger:
            self._logger.info("Starting pull generator pipeline...")
            self._logger.info(
                f"Target: {self.config.num_records:,} records, "
                f"{self.config.batch_size} records per batch"
            )

        start_time = time.time()

        records = PullGenerator(
            self.producer,
            config=self.generator_config,
            name="record-producer",
        )
        with ParquetWriter(
            self.config.output_file, self.config.compression, self._logger
        ) as writer:
            for batch in self.batcher.batches(records.iterator()):
                writer.write_frame(self.transformer.to_frame(batch))
            stats = writer.finish(self.batcher.pulled, records.state)

        if self._logger:
            self._logger.info(
                f"Pipeline completed in {time.time() - start_time:.2f} seconds "
                f"({records.state.value})"
            )

        return stats
