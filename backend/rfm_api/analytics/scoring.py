"""Percentile-based RFM scoring."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence

from loguru import logger

from rfm_api.core.errors import InvalidArgumentError
from rfm_api.schemas.rfm import CustomerRecord, ScoredCustomer

# Upper percentile bound for scores 1..4; anything above scores 5.
SCORE_THRESHOLDS = (0.2, 0.4, 0.6, 0.8)


def percentile_rank(value: float, sorted_values: Sequence[float]) -> float:
    """Rank ``value`` within ascending ``sorted_values`` on a 0-1 scale.

    The rank is the position of the first element ``>= value`` divided by
    ``n - 1``. Duplicates therefore all take the rank of their first
    occurrence. A value above every element ranks 1.
    """
    index = bisect_left(sorted_values, value)
    if index == len(sorted_values):
        return 1.0
    if index == 0:
        return 0.0
    return index / (len(sorted_values) - 1)


def percentile_to_score(percentile: float, invert: bool = False) -> int:
    """Map a percentile to a 1-5 score; ``invert`` flips it to ``6 - score``."""

    score = 5
    for candidate, bound in enumerate(SCORE_THRESHOLDS, start=1):
        if percentile <= bound:
            score = candidate
            break
    return 6 - score if invert else score


def score_customers(records: Sequence[CustomerRecord]) -> list[ScoredCustomer]:
    """Score every record against the whole of ``records``.

    Output order matches input order. Recency is inverted so the most recent
    customers score 5. Scores are only comparable within the same input.

    Raises:
        InvalidArgumentError: If ``records`` is empty.
    """
    if not records:
        raise InvalidArgumentError("cannot score an empty set of customers")

    recency_values = sorted(record.recency for record in records)
    frequency_values = sorted(record.frequency for record in records)
    monetary_values = sorted(record.monetary for record in records)

    scored = []
    for record in records:
        recency_score = percentile_to_score(
            percentile_rank(record.recency, recency_values), invert=True
        )
        frequency_score = percentile_to_score(
            percentile_rank(record.frequency, frequency_values)
        )
        monetary_score = percentile_to_score(
            percentile_rank(record.monetary, monetary_values)
        )
        scored.append(
            ScoredCustomer(
                id=record.id,
                recency_score=recency_score,
                frequency_score=frequency_score,
                monetary_score=monetary_score,
                x=frequency_score,
                y=monetary_score,
            )
        )

    logger.bind(count=len(scored)).debug("customers_scored")
    return scored
