"""Pydantic models for RFM segmentation endpoints."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CustomerRecord(BaseModel):
    """Raw recency/frequency/monetary values for one customer."""

    # NaN or infinite spend would corrupt the percentile sort
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(description="Customer identifier, e.g. CUST_001")
    recency: int = Field(description="Days since last purchase")
    frequency: int = Field(description="Number of purchases")
    monetary: Union[int, float] = Field(description="Total spend")


class ScoredCustomer(BaseModel):
    """Percentile-based 1-5 scores and grid coordinates for one customer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    recency_score: int = Field(alias="recencyScore", description="5 = most recent")
    frequency_score: int = Field(alias="frequencyScore")
    monetary_score: int = Field(alias="monetaryScore")
    x: int = Field(description="Grid column (frequency score)")
    y: int = Field(description="Grid row (monetary score)")


class GridCell(BaseModel):
    """Customers falling into one frequency/monetary cell."""

    count: int = 0
    items: List[ScoredCustomer] = Field(default_factory=list)


class FilterCriteria(BaseModel):
    """Minimum score per dimension. Values are applied literally."""

    recency: int = 1
    frequency: int = 1
    monetary: int = 1


class GridCellSummary(BaseModel):
    count: int
    is_selected: bool = Field(alias="isSelected")
    density: str

    model_config = ConfigDict(populate_by_name=True)


class GridSummary(BaseModel):
    """Display-oriented overview of a bucketed grid."""

    model_config = ConfigDict(populate_by_name=True)

    total_customers: int = Field(alias="totalCustomers")
    populated_cells: int = Field(alias="populatedCells")
    max_cell_count: int = Field(alias="maxCellCount")
    cells: Dict[str, GridCellSummary] = Field(default_factory=dict)


class GenerateRequest(BaseModel):
    """Request body for synthetic dataset generation."""

    count: Optional[int] = Field(
        default=None, description="Number of records; defaults to DEFAULT_GENERATE_COUNT"
    )
    seed: Optional[int] = Field(default=None, description="Optional RNG seed")


class ScoreRequest(BaseModel):
    records: List[CustomerRecord]


class FilterRequest(BaseModel):
    scores: List[ScoredCustomer]
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)


class RFMAnalysisOut(BaseModel):
    """Scored dataset together with its grid."""

    model_config = ConfigDict(populate_by_name=True)

    records: List[CustomerRecord] = Field(default_factory=list)
    scores: List[ScoredCustomer] = Field(default_factory=list)
    grid: Dict[str, GridCell] = Field(default_factory=dict)
    summary: GridSummary


class FilterOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    criteria: FilterCriteria
    total_customers: int = Field(alias="totalCustomers")
    filtered_customers: int = Field(alias="filteredCustomers")
    scores: List[ScoredCustomer] = Field(default_factory=list)
    grid: Dict[str, GridCell] = Field(default_factory=dict)
    summary: GridSummary


class SelectionToggleRequest(BaseModel):
    """Toggle every customer of one grid cell in the current selection."""

    model_config = ConfigDict(populate_by_name=True)

    scores: List[ScoredCustomer]
    cell_key: str = Field(alias="cellKey", description="Grid key such as '3-4'")
    selected_ids: List[str] = Field(default_factory=list, alias="selectedIds")


class SelectionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_ids: List[str] = Field(alias="selectedIds")
    count: int
    summary: GridSummary


class SelectedIdsResponse(BaseModel):
    """Echo-style response of the selected-ids submission endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    count: int
    selected_ids: List[str] = Field(default_factory=list, alias="selectedIds")


class SelectedIdsInfo(BaseModel):
    """Self-description returned by GET /selected-ids."""

    message: str
    description: str
    method: str
    body: Dict[str, str]
    response: Dict[str, str]
