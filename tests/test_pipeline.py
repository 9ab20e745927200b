"""Tests for the demo pipeline."""

import time

import pandas as pd
import pyarrow.parquet as pq
import pytest

from pullgen import HandoffState, ProducerFailure, PullGenerator
from pullgen.main import main
from pullgen.pipeline import (
    DataFrameTransformer,
    FakeRecordProducer,
    ParquetWriter,
    PipelineConfig,
    RecordBatcher,
    RecordPipeline,
)


def test_fake_record_producer_emits_records():
    """Test the producer pushes the requested number of records."""
    records = []
    producer = FakeRecordProducer(5, seed=7)

    producer(records.append)

    assert [record["id"] for record in records] == [0, 1, 2, 3, 4]
    assert producer.emitted == 5
    assert all(isinstance(record["email"], str) for record in records)


def test_fake_record_producer_is_reproducible():
    """Test the same seed produces the same records."""
    first, second = [], []

    FakeRecordProducer(3, seed=11)(first.append)
    FakeRecordProducer(3, seed=11)(second.append)

    assert [r["name"] for r in first] == [r["name"] for r in second]


def test_fake_record_producer_is_lazy_behind_generator():
    """Test wrapping the producer only creates records on demand."""
    producer = FakeRecordProducer(100)
    gen = PullGenerator(producer)
    it = iter(gen)

    assert producer.emitted == 0
    assert next(it)["id"] == 0
    assert next(it)["id"] == 1
    assert producer.emitted == 1


def counting_records(progress, total):
    """Producer emitting ``total`` records, counting each one before it is emitted."""

    def run(emit):
        for i in range(total):
            progress["count"] += 1
            emit({"id": i})

    return run


def test_record_batcher():
    """Test records are grouped with a short final batch."""
    batcher = RecordBatcher(batch_size=2)
    gen = PullGenerator(counting_records({"count": 0}, 5))

    batches = list(batcher.batches(gen.iterator()))

    assert [[r["id"] for r in batch] for batch in batches] == [[0, 1], [2, 3], [4]]
    assert batcher.pulled == 5
    assert gen.state is HandoffState.FINISHED


def test_record_batcher_stops_at_batch_boundary():
    """Test a full batch does not resume the producer for the next record."""
    progress = {"count": 0}
    gen = PullGenerator(counting_records(progress, 10))
    it = gen.iterator()
    batcher = RecordBatcher(batch_size=3)

    assert [r["id"] for r in batcher.take(it)] == [0, 1, 2]
    time.sleep(0.1)
    assert progress["count"] == 3
    assert gen.state is HandoffState.SUSPENDED

    assert [r["id"] for r in batcher.take(it)] == [3, 4, 5]
    time.sleep(0.1)
    assert progress["count"] == 6
    assert batcher.pulled == 6


def test_record_batcher_empty_generator():
    """Test an empty producer yields no batches."""
    batcher = RecordBatcher(batch_size=4)
    gen = PullGenerator(lambda emit: None)

    assert batcher.take(gen.iterator()) == []
    assert list(batcher.batches(gen.iterator())) == []
    assert batcher.pulled == 0


def test_record_batcher_rejects_invalid_size():
    """Test batch_size must be positive."""
    with pytest.raises(ValueError):
        RecordBatcher(batch_size=0)


def test_dataframe_transformer():
    """Test frames keep a fixed column layout and are numbered in build order."""
    transformer = DataFrameTransformer(columns=["id", "name"])

    first = transformer.to_frame([{"id": 1, "name": "Ann"}, {"id": 2}])
    second = transformer.to_frame([{"name": "Bob", "id": 3, "extra": True}])

    assert list(first.columns) == ["id", "name", "batch_number"]
    assert pd.isna(first["name"][1])
    assert list(second.columns) == ["id", "name", "batch_number"]
    assert list(second["batch_number"]) == [2]
    assert transformer.frames_built == 2


def test_parquet_writer(tmp_path):
    """Test frames are appended as row groups of one Parquet file."""
    output_path = tmp_path / "out" / "test.parquet"

    with ParquetWriter(output_path) as writer:
        writer.write_frame(pd.DataFrame({"id": [1, 2], "name": ["Alice", "Bob"]}))
        writer.write_frame(pd.DataFrame({"id": [3], "name": ["Charlie"]}))
        stats = writer.finish(records_pulled=3, producer_state=HandoffState.FINISHED)

    assert stats.total_rows == 3
    assert stats.total_batches == 2
    assert stats.records_pulled == 3
    assert stats.producer_state is HandoffState.FINISHED
    assert stats.file_size_bytes > 0
    assert pq.ParquetFile(output_path).num_row_groups == 2
    assert list(pd.read_parquet(output_path)["name"]) == ["Alice", "Bob", "Charlie"]


def test_parquet_writer_without_frames(tmp_path):
    """Test finishing without frames creates no file."""
    output_path = tmp_path / "none.parquet"

    with ParquetWriter(output_path) as writer:
        stats = writer.finish()

    assert stats.total_rows == 0
    assert stats.file_size_bytes == 0
    assert stats.producer_state is None
    assert not output_path.exists()


def test_pipeline_config_validation():
    """Test invalid pipeline settings are rejected."""
    with pytest.raises(ValueError):
        PipelineConfig(batch_size=0)
    with pytest.raises(ValueError):
        PipelineConfig(num_records=-5)


def test_record_pipeline_end_to_end(tmp_path):
    """Test the pipeline streams every record into Parquet."""
    config = PipelineConfig(
        num_records=25, batch_size=10, output_file=tmp_path / "records.parquet"
    )

    stats = RecordPipeline(config).execute()

    assert stats.total_rows == 25
    assert stats.total_batches == 3
    assert stats.records_pulled == 25
    assert stats.producer_state is HandoffState.FINISHED
    df = pd.read_parquet(config.output_file)
    assert list(df.columns[:2]) == ["id", "name"]
    assert list(df["id"]) == list(range(25))
    assert sorted(df["batch_number"].unique()) == [1, 2, 3]


def test_record_pipeline_with_no_records(tmp_path):
    """Test an empty producer writes nothing."""
    config = PipelineConfig(num_records=0, output_file=tmp_path / "empty.parquet")

    stats = RecordPipeline(config).execute()

    assert stats.total_rows == 0
    assert stats.total_batches == 0
    assert stats.producer_state is HandoffState.FINISHED
    assert not config.output_file.exists()


def test_record_pipeline_surfaces_producer_failure(tmp_path):
    """Test a failing producer stops the pipeline with ProducerFailure."""
    config = PipelineConfig(num_records=10, output_file=tmp_path / "broken.parquet")
    pipeline = RecordPipeline(config)

    def broken(emit):
        emit({"id": 0})
        raise OSError("source went away")

    pipeline.producer = broken

    with pytest.raises(ProducerFailure) as exc_info:
        pipeline.execute()
    assert isinstance(exc_info.value.cause, OSError)


def test_main_runs_demo(monkeypatch, tmp_path):
    """Test the entry point writes the demo file and exits cleanly."""
    monkeypatch.setenv("NUM_RECORDS", "30")
    monkeypatch.setenv("BATCH_SIZE", "10")
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("VERBOSE", "false")

    assert main() == 0
    assert (tmp_path / "records.parquet").exists()


def test_main_reports_bad_config(monkeypatch):
    """Test the entry point returns a failure code on invalid settings."""
    monkeypatch.setenv("BATCH_SIZE", "0")

    assert main() == 1
