"""Main entry point for the pullgen demo pipeline."""

import logging
import sys

from .config import get_app_config, get_generator_config
from .errors import ProducerFailure
from .pipeline import PipelineConfig, RecordPipeline, WriteStatistics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(stats: WriteStatistics, config: PipelineConfig):
    """Print summary statistics.

    Args:
        stats: Statistics from Parquet writing
        config: Pipeline configuration used for the run
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    print("\nParquet File Writing:")
    print(f"  Time taken: {stats.elapsed_time:.2f} seconds")
    print(f"  Records pulled: {stats.records_pulled:,}")
    if stats.producer_state is not None:
        print(f"  Producer state: {stats.producer_state.value}")
    print(f"  Number of rows: {stats.total_rows:,}")
    print(f"  Number of batches (row groups): {stats.total_batches}")
    print(f"  File size: {stats.file_size_bytes / (1024 * 1024):.2f} MB")
    print(f"  Compression: {config.compression}")
    print(f"  File path: {config.output_file}")

    print("\n" + "=" * 80)


def main():
    """Main execution function."""
    logger.info("Starting pullgen demo pipeline")
    logger.info("=" * 80)

    try:
        app_config = get_app_config()
        generator_config = get_generator_config()
        setup_logging(app_config.verbose)

        logger.info(f"Number of records: {app_config.num_records:,}")
        logger.info(f"Batch size: {app_config.batch_size:,}")
        logger.info(f"Worker threads: daemon={generator_config.daemon}")

        pipeline_config = PipelineConfig(
            num_records=app_config.num_records,
            batch_size=app_config.batch_size,
            seed=app_config.seed,
            compression=app_config.compression,
            output_file=app_config.output_dir / "records.parquet",
        )

        stats = RecordPipeline(pipeline_config, generator_config).execute()
        print_summary(stats, pipeline_config)

        logger.info("\nExecution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except ProducerFailure as e:
        logger.error(f"\nRecord producer failed: {e.cause!r}", exc_info=True)
        return 1
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
