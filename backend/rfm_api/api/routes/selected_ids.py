"""Echo endpoint receiving customer ids selected on the RFM grid."""

import anyio
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from rfm_api.core.config import settings
from rfm_api.core.rate_limit import limiter
from rfm_api.schemas.rfm import SelectedIdsInfo, SelectedIdsResponse

router = APIRouter(prefix="/selected-ids", tags=["selected-ids"])


def _failure(message: str, status_code: int) -> JSONResponse:
    body = SelectedIdsResponse(success=False, message=message, count=0, selected_ids=[])
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.post("", response_model=SelectedIdsResponse)
@limiter.limit(settings.SUBMIT_RATE)
async def submit_selected_ids(request: Request):
    """Accept a list of customer ids and echo it back.

    The body is validated by hand so malformed input yields the same
    ``{success, message, count, selectedIds}`` envelope as a success.
    """

    try:
        try:
            body = await request.json()
        except ValueError:
            return _failure("Invalid request: body must be valid JSON", status.HTTP_400_BAD_REQUEST)

        selected_ids = body.get("selectedIds") if isinstance(body, dict) else None
        if not isinstance(selected_ids, list):
            return _failure(
                "Invalid request: selectedIds must be an array",
                status.HTTP_400_BAD_REQUEST,
            )
        if not all(isinstance(item, str) for item in selected_ids):
            return _failure(
                "Invalid request: all selectedIds must be strings",
                status.HTTP_400_BAD_REQUEST,
            )

        # Simulated processing latency
        await anyio.sleep(settings.SUBMIT_DELAY_MS / 1000)

        logger.bind(count=len(selected_ids)).info("selected_ids_received")
        return SelectedIdsResponse(
            success=True,
            message=f"Successfully processed {len(selected_ids)} selected customer(s)",
            count=len(selected_ids),
            selected_ids=selected_ids,
        )
    except Exception:
        logger.exception("selected_ids_failed")
        return _failure("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("", response_model=SelectedIdsInfo)
async def describe_selected_ids() -> SelectedIdsInfo:
    """Describe the submission endpoint for API explorers."""

    return SelectedIdsInfo(
        message="RFM Selected IDs API",
        description="POST endpoint for processing selected customer IDs from RFM analysis",
        method="POST",
        body={"selectedIds": "string[] - Array of customer IDs to process"},
        response={
            "success": "boolean - Operation success status",
            "message": "string - Response message",
            "count": "number - Number of processed IDs",
            "selectedIds": "string[] - Echoed back selected IDs",
        },
    )
