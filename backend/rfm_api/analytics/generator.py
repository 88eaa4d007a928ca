"""Synthetic customer dataset generation."""

from __future__ import annotations

import math
import random

from loguru import logger

from rfm_api.core.errors import InvalidArgumentError
from rfm_api.schemas.rfm import CustomerRecord

# Share of records overwritten with each cohort's values. Indexes are drawn
# with replacement, so fewer records may actually be affected.
VIP_SHARE = 0.05
INACTIVE_SHARE = 0.10


def customer_id(index: int) -> str:
    """Return the identifier for the 1-based ``index``, e.g. ``CUST_007``."""

    return f"CUST_{index:03d}"


def _base_record(rng: random.Random, index: int) -> CustomerRecord:
    return CustomerRecord(
        id=customer_id(index),
        recency=rng.randint(1, 365),
        frequency=rng.randint(1, 50),
        monetary=10 + rng.randrange(9990),
    )


def _overwrite_cohort(
    records: list[CustomerRecord],
    rng: random.Random,
    share: float,
    make_update,
) -> int:
    picks = math.floor(len(records) * share)
    for _ in range(picks):
        index = rng.randrange(len(records))
        records[index] = records[index].model_copy(update=make_update(rng))
    return picks


def _vip_values(rng: random.Random) -> dict:
    return {
        "frequency": 30 + rng.randrange(20),
        "monetary": 5000 + rng.randrange(5000),
    }


def _inactive_values(rng: random.Random) -> dict:
    return {
        "recency": 300 + rng.randrange(100),
        "frequency": 1 + rng.randrange(5),
        "monetary": 10 + rng.randrange(500),
    }


def generate_customers(
    count: int, rng: random.Random | None = None
) -> list[CustomerRecord]:
    """Generate ``count`` synthetic customers with VIP and inactive cohorts.

    Base values are uniform: recency in [1, 365] days, frequency in [1, 50]
    purchases, monetary in [10, 10000). A random 5% of the records is then
    overwritten with VIP values (frequency 30-49, monetary 5000-9999) and a
    random 10% with inactive values (recency 300-399, frequency 1-5,
    monetary 10-509).

    Args:
        count: Number of records to produce. Must be a positive integer.
        rng: Random source; an unseeded ``random.Random`` when omitted.

    Raises:
        InvalidArgumentError: If ``count`` is not a positive integer.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidArgumentError(f"count must be a positive integer, got {count!r}")

    rng = rng or random.Random()
    records = [_base_record(rng, index) for index in range(1, count + 1)]
    vip = _overwrite_cohort(records, rng, VIP_SHARE, _vip_values)
    inactive = _overwrite_cohort(records, rng, INACTIVE_SHARE, _inactive_values)

    logger.bind(count=count, vip_picks=vip, inactive_picks=inactive).debug(
        "customers_generated"
    )
    return records


SAMPLE_CUSTOMERS: tuple[CustomerRecord, ...] = tuple(
    CustomerRecord(id=customer_id(i), recency=r, frequency=f, monetary=m)
    for i, (r, f, m) in enumerate(
        [
            (15, 25, 8500),
            (120, 8, 3200),
            (45, 15, 5200),
            (300, 3, 800),
            (7, 30, 12000),
            (180, 5, 1500),
            (30, 18, 6800),
            (250, 2, 400),
            (10, 28, 9500),
            (90, 12, 4200),
            (365, 1, 100),
            (5, 35, 15000),
            (60, 10, 3800),
            (200, 4, 1200),
            (20, 22, 7800),
            (150, 6, 2100),
            (40, 16, 5500),
            (280, 2, 600),
            (12, 26, 8800),
            (100, 9, 3500),
        ],
        start=1,
    )
)
