import random

import pytest
from pydantic import ValidationError

from rfm_api.analytics.generator import SAMPLE_CUSTOMERS, generate_customers
from rfm_api.analytics.scoring import percentile_rank, percentile_to_score, score_customers
from rfm_api.core.errors import InvalidArgumentError
from rfm_api.schemas.rfm import CustomerRecord


def test_middle_value_ranks_at_half():
    values = [10, 20, 30, 40, 50]
    assert percentile_rank(30, values) == 0.5
    assert percentile_to_score(0.5) == 3


def test_rank_edges():
    values = [10, 20, 30, 40, 50]
    assert percentile_rank(10, values) == 0.0
    assert percentile_rank(50, values) == 1.0
    assert percentile_rank(60, values) == 1.0
    # Not present: first element >= 25 is 30 at index 2
    assert percentile_rank(25, values) == 0.5


def test_ties_take_first_occurrence():
    values = [1, 2, 2, 2, 5]
    assert percentile_rank(2, values) == 0.25


@pytest.mark.parametrize(
    "percentile, expected",
    [(0.0, 1), (0.2, 1), (0.21, 2), (0.4, 2), (0.6, 3), (0.8, 4), (0.81, 5), (1.0, 5)],
)
def test_percentile_to_score_thresholds(percentile, expected):
    assert percentile_to_score(percentile) == expected
    assert percentile_to_score(percentile, invert=True) == 6 - expected


def test_recency_is_inverted():
    records = [
        CustomerRecord(id=f"CUST_{i:03d}", recency=r, frequency=10, monetary=100)
        for i, r in enumerate([10, 20, 30, 40, 50], start=1)
    ]
    scores = score_customers(records)
    assert [s.recency_score for s in scores] == [5, 4, 3, 2, 1]


def test_scores_in_range_and_coordinates_match():
    scores = score_customers(generate_customers(200, random.Random(5)))
    assert len(scores) == 200
    for score in scores:
        for value in (score.recency_score, score.frequency_score, score.monetary_score):
            assert value in {1, 2, 3, 4, 5}
        assert score.x == score.frequency_score
        assert score.y == score.monetary_score


def test_output_preserves_input_order():
    records = generate_customers(40, random.Random(9))
    assert [s.id for s in score_customers(records)] == [r.id for r in records]


def test_sample_scoring_is_idempotent():
    first = score_customers(SAMPLE_CUSTOMERS)
    second = score_customers(SAMPLE_CUSTOMERS)
    assert first == second


def test_sample_best_and_worst_customers():
    scores = {s.id: s for s in score_customers(SAMPLE_CUSTOMERS)}
    best = scores["CUST_012"]  # recency 5, frequency 35, monetary 15000
    assert (best.recency_score, best.frequency_score, best.monetary_score) == (5, 5, 5)
    worst = scores["CUST_011"]  # recency 365, frequency 1, monetary 100
    assert (worst.recency_score, worst.frequency_score, worst.monetary_score) == (1, 1, 1)


def test_single_record_scores_without_error():
    [score] = score_customers([CustomerRecord(id="CUST_001", recency=4, frequency=2, monetary=30)])
    assert (score.recency_score, score.frequency_score, score.monetary_score) == (5, 1, 1)


def test_scores_are_relative_to_dataset():
    def record(index, recency):
        return CustomerRecord(id=f"CUST_{index:03d}", recency=recency, frequency=1, monetary=10)

    small = [record(1, 10), record(2, 20), record(3, 30)]
    larger = small + [record(4, 1), record(5, 2), record(6, 3), record(7, 4)]

    assert score_customers(small)[1].recency_score == 3
    assert score_customers(larger)[1].recency_score == 1


def test_empty_input_rejected():
    with pytest.raises(InvalidArgumentError):
        score_customers([])


@pytest.mark.parametrize("spend", [float("nan"), float("inf")])
def test_record_rejects_non_finite_spend(spend):
    with pytest.raises(ValidationError):
        CustomerRecord(id="CUST_001", recency=1, frequency=1, monetary=spend)
