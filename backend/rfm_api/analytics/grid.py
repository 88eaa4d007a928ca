"""Filtering, 5x5 grid bucketing and grid selection helpers."""

from __future__ import annotations

from typing import Iterable, Sequence

from rfm_api.schemas.rfm import (
    FilterCriteria,
    GridCell,
    GridCellSummary,
    GridSummary,
    ScoredCustomer,
)

GRID_SIZE = 5

SCORE_LABELS = {
    1: "Very Low",
    2: "Low",
    3: "Medium",
    4: "High",
    5: "Very High",
}

# (upper bound inclusive, band) for non-empty cells
DENSITY_BANDS = ((2, "low"), (5, "medium"), (10, "high"))


def cell_key(x: int, y: int) -> str:
    return f"{x}-{y}"


def grid_keys() -> list[str]:
    """All 25 cell keys, column-major from ``1-1`` to ``5-5``."""

    return [
        cell_key(x, y)
        for x in range(1, GRID_SIZE + 1)
        for y in range(1, GRID_SIZE + 1)
    ]


def describe_score(score: int) -> str:
    return SCORE_LABELS.get(score, "Unknown")


def filter_scores(
    scores: Iterable[ScoredCustomer], criteria: FilterCriteria
) -> list[ScoredCustomer]:
    """Keep customers meeting every minimum in ``criteria``.

    Thresholds are not clamped: 0 keeps everyone, 6 keeps nobody.
    """
    return [
        score
        for score in scores
        if score.recency_score >= criteria.recency
        and score.frequency_score >= criteria.frequency
        and score.monetary_score >= criteria.monetary
    ]


def bucketize(scores: Iterable[ScoredCustomer]) -> dict[str, GridCell]:
    """Group customers by ``"x-y"`` cell; all 25 cells are always present.

    Customers whose coordinates fall outside the grid are dropped.
    """
    grid = {key: GridCell() for key in grid_keys()}
    for score in scores:
        cell = grid.get(cell_key(score.x, score.y))
        if cell is None:
            continue
        cell.count += 1
        cell.items.append(score)
    return grid


def toggle_cell_selection(
    grid: dict[str, GridCell], key: str, selected_ids: Sequence[str]
) -> list[str]:
    """Toggle every customer of cell ``key`` in ``selected_ids``.

    Already selected ids are removed and the rest appended, in cell order.
    Unknown or empty cells return the selection unchanged.
    """
    selection = list(selected_ids)
    cell = grid.get(key)
    if cell is None or cell.count == 0:
        return selection

    for item in cell.items:
        if item.id in selection:
            selection.remove(item.id)
        else:
            selection.append(item.id)
    return selection


def density_band(count: int) -> str:
    if count == 0:
        return "empty"
    for bound, band in DENSITY_BANDS:
        if count <= bound:
            return band
    return "very_high"


def summarize_grid(
    grid: dict[str, GridCell], selected_ids: Iterable[str] = ()
) -> GridSummary:
    selected = set(selected_ids)
    cells = {
        key: GridCellSummary(
            count=cell.count,
            is_selected=any(item.id in selected for item in cell.items),
            density=density_band(cell.count),
        )
        for key, cell in grid.items()
    }
    counts = [cell.count for cell in grid.values()]
    return GridSummary(
        total_customers=sum(counts),
        populated_cells=sum(1 for count in counts if count > 0),
        max_cell_count=max(counts, default=0),
        cells=cells,
    )
