"""Category filter endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from opensearchpy.exceptions import TransportError
from sqlalchemy.orm import Session

from catalog_filters.api.schemas import ErrorResponse, FilterListResponse
from catalog_filters.db.database import get_session
from catalog_filters.db.repositories import (
    AttributeGroupRepository,
    CategoryRepository,
    FeatureRepository,
    FilterRepository,
    FilterTemplateRepository,
    ManufacturerRepository,
)
from catalog_filters.exceptions import LookupMissError
from catalog_filters.filters import CriteriaSources, FilterBuilder
from catalog_filters.search.aggregations import AggregationHelper
from catalog_filters.search.client import client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["filters"])


def get_filter_builder(
    id_shop: int = Query(1, ge=1, description="Shop ID"),
    session: Session = Depends(get_session),
) -> FilterBuilder:
    """Wire a filter builder to the request's session and shop."""
    sources = CriteriaSources(
        features=FeatureRepository(session),
        attribute_groups=AttributeGroupRepository(session),
        manufacturers=ManufacturerRepository(session),
        categories=CategoryRepository(session),
        custom_criterias=FilterRepository(session),
        aggregator=AggregationHelper(client, id_shop),
    )
    return FilterBuilder(FilterTemplateRepository(session), sources)


@router.get(
    "/categories/{id_category}/filters",
    response_model=FilterListResponse,
    responses={500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Get category filters",
)
async def get_category_filters(
    id_category: int,
    id_shop: int = Query(1, ge=1, description="Shop ID"),
    id_lang: int = Query(1, ge=1, description="Language ID"),
    builder: FilterBuilder = Depends(get_filter_builder),
) -> FilterListResponse:
    """
    Build the filters configured for a category.

    - **Range input / slider**: `criteria` is `{min_value, max_value}`
    - **Checkbox / list of values**: `criteria` is a list; `criteria_fields`
      names the label and value keys of each entry
    - Categories without a filter template return an empty list
    """
    try:
        filters = await run_in_threadpool(builder.build, id_category, id_shop, id_lang)
    except LookupMissError as e:
        logger.error(
            "Inconsistent catalog data while building filters",
            extra={"id_category": id_category, "id_shop": id_shop, "error": str(e)},
        )
        raise HTTPException(status_code=500, detail=str(e)) from e
    except TransportError as e:
        logger.error(
            "Product aggregation failed",
            extra={"id_category": id_category, "id_shop": id_shop, "error": str(e)},
        )
        raise HTTPException(
            status_code=503, detail="Product search service unavailable"
        ) from e

    return FilterListResponse(id_category=id_category, filters=filters)
