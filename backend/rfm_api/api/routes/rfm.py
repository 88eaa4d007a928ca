"""API endpoints for RFM dataset generation, scoring and grid views."""

import random

from anyio import fail_after
from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger

from rfm_api.analytics.generator import SAMPLE_CUSTOMERS, generate_customers
from rfm_api.analytics.grid import (
    bucketize,
    filter_scores,
    summarize_grid,
    toggle_cell_selection,
)
from rfm_api.analytics.scoring import score_customers
from rfm_api.core.concurrency import run_in_thread_limited
from rfm_api.core.config import settings
from rfm_api.core.rate_limit import limiter
from rfm_api.schemas.rfm import (
    CustomerRecord,
    FilterOut,
    FilterRequest,
    GenerateRequest,
    RFMAnalysisOut,
    ScoreRequest,
    SelectionOut,
    SelectionToggleRequest,
)

router = APIRouter(prefix="/rfm", tags=["rfm"])


def _analyze(records: list[CustomerRecord]) -> RFMAnalysisOut:
    """Score ``records`` and bucket them into the grid."""

    scores = score_customers(records)
    grid = bucketize(scores)
    return RFMAnalysisOut(
        records=records,
        scores=scores,
        grid=grid,
        summary=summarize_grid(grid),
    )


@router.post("/generate", response_model=RFMAnalysisOut)
@limiter.limit(settings.GENERATE_RATE)
async def generate_dataset(payload: GenerateRequest, request: Request) -> RFMAnalysisOut:
    """Generate a fresh synthetic dataset and return it scored and bucketed.

    Any selection made against a previous dataset no longer applies.
    """

    count = settings.DEFAULT_GENERATE_COUNT if payload.count is None else payload.count
    if count > settings.MAX_GENERATE_COUNT:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"count must not exceed {settings.MAX_GENERATE_COUNT}",
        )
    rng = random.Random(payload.seed) if payload.seed is not None else None

    try:
        with fail_after(settings.GENERATE_OP_TIMEOUT_SEC):
            records = await run_in_thread_limited(generate_customers, count, rng)
            analysis = await run_in_thread_limited(_analyze, records)
    except TimeoutError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dataset generation timed out. Please retry.",
        ) from exc

    logger.bind(
        count=count,
        seeded=payload.seed is not None,
        populated_cells=analysis.summary.populated_cells,
    ).info("rfm_dataset_generated")
    return analysis


@router.get("/sample", response_model=RFMAnalysisOut)
async def sample_dataset() -> RFMAnalysisOut:
    """Return the fixed 20-customer sample dataset, scored."""

    return _analyze(list(SAMPLE_CUSTOMERS))


@router.post("/score", response_model=RFMAnalysisOut)
async def score_dataset(payload: ScoreRequest) -> RFMAnalysisOut:
    """Score caller-supplied records against each other."""

    return _analyze(payload.records)


@router.post("/filter", response_model=FilterOut)
async def filter_dataset(payload: FilterRequest) -> FilterOut:
    """Apply minimum-score criteria to an already scored dataset."""

    filtered = filter_scores(payload.scores, payload.criteria)
    grid = bucketize(filtered)
    logger.bind(
        criteria=payload.criteria.model_dump(),
        total=len(payload.scores),
        kept=len(filtered),
    ).debug("rfm_scores_filtered")
    return FilterOut(
        criteria=payload.criteria,
        total_customers=len(payload.scores),
        filtered_customers=len(filtered),
        scores=filtered,
        grid=grid,
        summary=summarize_grid(grid),
    )


@router.post("/selection/toggle", response_model=SelectionOut)
async def toggle_selection(payload: SelectionToggleRequest) -> SelectionOut:
    """Toggle all customers of one grid cell in the caller's selection."""

    grid = bucketize(payload.scores)
    selected = toggle_cell_selection(grid, payload.cell_key, payload.selected_ids)
    return SelectionOut(
        selected_ids=selected,
        count=len(selected),
        summary=summarize_grid(grid, selected),
    )
