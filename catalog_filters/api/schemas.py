"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field

from catalog_filters.filters.models import Filter


class FilterListResponse(BaseModel):
    """Populated filters for a category page."""

    id_category: int = Field(
        ..., description="Category the filters were built for", json_schema_extra={"example": 42}
    )
    filters: list[Filter] = Field(
        ...,
        description=(
            "Filters in template order. Input and slider filters carry a "
            "{min_value, max_value} record, the other styles a list of criteria "
            "read through criteria_fields."
        ),
    )


class ErrorResponse(BaseModel):
    """Error payload returned with non-2xx responses."""

    detail: str = Field(..., description="Human-readable error message")
