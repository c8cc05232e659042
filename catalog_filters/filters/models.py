"""Pydantic models for filter templates and built filters."""

from pydantic import BaseModel, Field, model_serializer


class FilterTemplate(BaseModel):
    """A filter configured for a category, as read from the template store."""

    id_filter: int = Field(..., description="Filter identifier")
    filter_type: int = Field(
        ...,
        description="Filter type (see FilterType); unknown values are passed through",
        json_schema_extra={"example": 3},
    )
    filter_style: int = Field(
        ...,
        description="Display style (see FilterStyle)",
        json_schema_extra={"example": 3},
    )
    id_key: int | None = Field(
        None,
        description="Referenced feature or attribute group ID",
        json_schema_extra={"example": 7},
    )
    criteria_suffix: str | None = Field(
        None,
        description="Unit appended to weight criteria labels",
        json_schema_extra={"example": "kg"},
    )
    position: int = Field(0, description="Position of the filter in its template")


class RangeCriteria(BaseModel):
    """Lower and upper bound offered by range input and slider filters."""

    min_value: float = Field(..., json_schema_extra={"example": 3})
    max_value: float = Field(..., json_schema_extra={"example": 9})


class CriteriaFields(BaseModel):
    """Keys of each criterion holding the display label and the submitted value."""

    label_field: str = Field("name", json_schema_extra={"example": "name"})
    value_field: str = Field(..., json_schema_extra={"example": "id_manufacturer"})


class Filter(FilterTemplate):
    """A filter template with its resolved name and criteria."""

    name: str = Field("", description="Display name of the filter")
    criteria: RangeCriteria | list[dict] | None = Field(
        None,
        description=(
            "Range record for input/slider styles, list of criteria otherwise. "
            "Omitted when the filter type or style is not recognized."
        ),
    )
    criteria_fields: CriteriaFields | None = Field(
        None, description="Which criterion keys hold the label and the value"
    )

    @model_serializer(mode="wrap")
    def _omit_missing_criteria(self, handler):
        # Filters without computed criteria carry no criteria keys
        data = handler(self)
        for key in ("criteria", "criteria_fields"):
            if key in data and data[key] is None:
                del data[key]
        return data


class BuildContext(BaseModel):
    """Request scope of a single filter build."""

    id_category: int
    id_shop: int
    id_lang: int
