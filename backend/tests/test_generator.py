import random

import pytest

from rfm_api.analytics.generator import SAMPLE_CUSTOMERS, customer_id, generate_customers
from rfm_api.core.errors import InvalidArgumentError


@pytest.fixture(scope="module")
def dataset():
    return generate_customers(300, random.Random(7))


def test_generates_exact_count_with_sequential_ids(dataset):
    assert len(dataset) == 300
    assert [record.id for record in dataset] == [f"CUST_{i:03d}" for i in range(1, 301)]


def test_ids_pad_to_three_digits_minimum():
    assert customer_id(1) == "CUST_001"
    assert customer_id(42) == "CUST_042"
    assert customer_id(1234) == "CUST_1234"


def test_values_stay_within_generator_bounds(dataset):
    for record in dataset:
        assert 1 <= record.recency <= 399
        assert 1 <= record.frequency <= 50
        assert 10 <= record.monetary < 10000


def test_recency_above_365_only_comes_from_inactive_cohort(dataset):
    for record in dataset:
        if record.recency > 365:
            assert record.recency >= 300
            assert record.frequency <= 5
            assert record.monetary <= 509


def test_same_seed_reproduces_dataset():
    first = generate_customers(50, random.Random(11))
    second = generate_customers(50, random.Random(11))
    assert first == second


def test_single_record_dataset():
    records = generate_customers(1, random.Random(3))
    assert len(records) == 1
    assert records[0].id == "CUST_001"


@pytest.mark.parametrize("count", [0, -5])
def test_non_positive_count_rejected(count):
    with pytest.raises(InvalidArgumentError):
        generate_customers(count)


def test_non_integer_count_rejected():
    with pytest.raises(InvalidArgumentError):
        generate_customers(2.5)


def test_sample_dataset_shape():
    assert len(SAMPLE_CUSTOMERS) == 20
    assert SAMPLE_CUSTOMERS[0].id == "CUST_001"
    assert SAMPLE_CUSTOMERS[-1].id == "CUST_020"
    assert SAMPLE_CUSTOMERS[11].monetary == 15000
