"""Callback-style producers that feed pull generators."""

import logging
from typing import Any, Callable, Dict

from faker import Faker

logger = logging.getLogger(__name__)

RECORD_COLUMNS = (
    "id",
    "name",
    "email",
    "city",
    "country",
    "job",
    "company",
    "date_of_birth",
)


class FakeRecordProducer:
    """
    Emits fake person records one at a time.

    Written in callback style (it pushes values into ``emit``) so that a
    PullGenerator can turn it into a lazy iterator.
    """

    def __init__(self, num_records: int, seed: int = 42):
        """Initialize the producer.

        Args:
            num_records: Number of records to emit
            seed: Random seed for reproducibility
        """
        if num_records < 0:
            raise ValueError("num_records must not be negative")
        self.num_records = num_records
        self.seed = seed
        self.emitted = 0

    def __call__(self, emit: Callable[[Dict[str, Any]], None]) -> None:
        """Emit ``num_records`` records from a freshly seeded Faker.

        Args:
            emit: Callback receiving each record
        """
        faker = Faker()
        faker.seed_instance(self.seed)
        logger.info(f"Producing {self.num_records:,} fake records...")

        for i in range(self.num_records):
            emit(
                {
                    "id": i,
                    "name": faker.name(),
                    "email": faker.email(),
                    "city": faker.city(),
                    "country": faker.country(),
                    "job": faker.job(),
                    "company": faker.company(),
                    "date_of_birth": faker.date_of_birth(),
                }
            )
            self.emitted += 1

            if self.emitted % 10000 == 0:
                logger.debug(f"Produced {self.emitted:,} records...")

        logger.info(f"Successfully produced {self.emitted:,} records")
